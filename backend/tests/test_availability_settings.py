from datetime import date

import pytest

from interview_scheduler.core.errors import ValidationError
from interview_scheduler.services.availability import (
    ExceptionDay,
    WeeklyWindow,
    list_exception_dates,
    list_weekly_availability,
    replace_availability,
)
from interview_scheduler.services.scheduling_settings import (
    SchedulingConfig,
    get_scheduling_settings,
    save_scheduling_settings,
)


def test_replace_orders_windows_by_day_and_start(session, interviewer, tenant):
    windows, exceptions = replace_availability(
        session,
        interviewer.id,
        tenant.id,
        [
            WeeklyWindow(2, "13:00", "17:00"),
            WeeklyWindow(1, "14:00", "16:00"),
            WeeklyWindow(1, "9:00", "12:00"),
        ],
        [ExceptionDay(date(2030, 1, 14)), ExceptionDay(date(2030, 1, 8))],
    )

    assert [(w.day_of_week, w.start_time) for w in windows] == [
        (1, "9:00"),
        (1, "14:00"),
        (2, "13:00"),
    ]
    assert [e.exception_date for e in exceptions] == [date(2030, 1, 8), date(2030, 1, 14)]


def test_replace_overwrites_previous_rows(session, interviewer, tenant):
    replace_availability(
        session,
        interviewer.id,
        tenant.id,
        [WeeklyWindow(1, "09:00", "12:00"), WeeklyWindow(3, "09:00", "12:00")],
        [ExceptionDay(date(2030, 1, 8))],
    )
    replace_availability(session, interviewer.id, tenant.id, [WeeklyWindow(5, "10:00", "11:00")], [])

    windows = list_weekly_availability(session, interviewer.id, tenant.id)
    assert [(w.day_of_week, w.start_time, w.end_time) for w in windows] == [(5, "10:00", "11:00")]
    assert list_exception_dates(session, interviewer.id, tenant.id) == []


@pytest.mark.parametrize(
    "bad_window",
    [
        WeeklyWindow(1, "12:00", "09:00"),
        WeeklyWindow(1, "09:00", "09:00"),
        WeeklyWindow(7, "09:00", "10:00"),
        WeeklyWindow(1, "9am", "10:00"),
    ],
)
def test_invalid_window_keeps_previous_rows(session, interviewer, tenant, bad_window):
    replace_availability(
        session,
        interviewer.id,
        tenant.id,
        [WeeklyWindow(1, "09:00", "12:00")],
        [ExceptionDay(date(2030, 1, 8))],
    )

    with pytest.raises(ValidationError):
        replace_availability(
            session,
            interviewer.id,
            tenant.id,
            [WeeklyWindow(2, "09:00", "10:00"), bad_window],
            [],
        )

    windows = list_weekly_availability(session, interviewer.id, tenant.id)
    assert [(w.day_of_week, w.start_time) for w in windows] == [(1, "09:00")]
    assert len(list_exception_dates(session, interviewer.id, tenant.id)) == 1


def test_availability_is_scoped_per_tenant(session, interviewer, tenant):
    from interview_scheduler.models import Tenant

    other = Tenant(name="Other Co")
    session.add(other)
    session.commit()

    replace_availability(session, interviewer.id, tenant.id, [WeeklyWindow(1, "09:00", "12:00")], [])
    assert list_weekly_availability(session, interviewer.id, other.id) == []


def test_settings_default_when_missing(session, interviewer, tenant):
    config = get_scheduling_settings(session, interviewer.id, tenant.id)

    assert config == SchedulingConfig(
        meeting_duration=30,
        buffer_between_events=15,
        max_schedules_per_day=3,
        advance_booking_days=30,
        is_default=True,
    )


def test_settings_upsert(session, interviewer, tenant):
    save_scheduling_settings(
        session,
        interviewer.id,
        tenant.id,
        SchedulingConfig(meeting_duration=45, buffer_between_events=0),
    )
    save_scheduling_settings(
        session,
        interviewer.id,
        tenant.id,
        SchedulingConfig(meeting_duration=60, max_schedules_per_day=5),
    )

    config = get_scheduling_settings(session, interviewer.id, tenant.id)
    assert config.meeting_duration == 60
    assert config.buffer_between_events == 15
    assert config.max_schedules_per_day == 5
    assert not config.is_default


@pytest.mark.parametrize(
    "values",
    [
        {"meeting_duration": 4},
        {"buffer_between_events": -1},
        {"max_schedules_per_day": 0},
        {"advance_booking_days": 0},
    ],
)
def test_settings_validation(session, interviewer, tenant, values):
    with pytest.raises(ValidationError):
        save_scheduling_settings(session, interviewer.id, tenant.id, SchedulingConfig(**values))
    assert get_scheduling_settings(session, interviewer.id, tenant.id).is_default
