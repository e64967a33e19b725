"""
Slot Generator

Turns an interviewer's weekly availability into concrete bookable slots,
considering:
- Exception dates that block a whole day
- The daily booking cap (a day closes entirely once the cap is reached)
- Existing bookings, widened by the buffer between events
- The advance booking horizon

The result is advisory. Admission re-checks everything against live data.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Set, Tuple
from uuid import UUID

from sqlmodel import Session, select

from interview_scheduler.core.config import settings
from interview_scheduler.core.errors import ValidationError
from interview_scheduler.models import ACTIVE_BOOKING_STATUSES, Booking
from interview_scheduler.services.availability import (
    list_exception_dates,
    list_weekly_availability,
)
from interview_scheduler.services.intervals import (
    at_time,
    buffered_overlap,
    day_of_week,
    end_of_day,
    iter_days,
    parse_hhmm,
    start_of_day,
)
from interview_scheduler.services.permissions import get_interviewer
from interview_scheduler.services.scheduling_settings import (
    SchedulingConfig,
    get_scheduling_settings,
)

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1)


class _Window(Protocol):
    day_of_week: int
    start_time: str
    end_time: str


class _Busy(Protocol):
    start_time: datetime
    end_time: datetime


@dataclass(frozen=True)
class Slot:
    id: str
    start: datetime
    end: datetime


def slot_id(start: datetime) -> str:
    """Stable identifier: milliseconds since the epoch of the slot start."""
    return str((start - _EPOCH) // timedelta(milliseconds=1))


def resolve_range(
    config: SchedulingConfig,
    now: datetime,
    range_start: Optional[datetime] = None,
    range_end: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """Apply defaults, day rounding and the advance booking horizon."""
    start = range_start or now
    end = range_end or now + timedelta(days=settings.DEFAULT_SLOT_RANGE_DAYS)

    start = start_of_day(start)
    end = end_of_day(end)

    horizon = now + timedelta(days=config.advance_booking_days)
    if end > horizon:
        end = horizon
    return start, end


def compute_slots(
    config: SchedulingConfig,
    windows: Iterable[_Window],
    blocked_dates: Set[date],
    bookings: Iterable[_Busy],
    range_start: datetime,
    range_end: datetime,
    now: datetime,
) -> List[Slot]:
    """Walk each day in the (already resolved) range and emit open slots.

    ``bookings`` must contain only bookings that occupy their interval.
    """
    if config.meeting_duration <= 0:
        raise ValidationError("Meeting duration must be positive")

    duration = timedelta(minutes=config.meeting_duration)
    step = timedelta(minutes=config.meeting_duration + config.buffer_between_events)
    buffer_minutes = config.buffer_between_events

    windows_by_day: Dict[int, List[_Window]] = defaultdict(list)
    for window in windows:
        windows_by_day[window.day_of_week].append(window)
    for day_windows in windows_by_day.values():
        day_windows.sort(key=lambda w: parse_hhmm(w.start_time))

    busy = list(bookings)
    booked_per_day: Dict[date, int] = defaultdict(int)
    for booking in busy:
        booked_per_day[booking.start_time.date()] += 1

    slots: List[Slot] = []
    for day in iter_days(range_start.date(), range_end.date()):
        if datetime.combine(day, time.min) > range_end:
            break
        if day in blocked_dates:
            continue
        # Whole day closes once the cap is reached, even if gaps remain
        if booked_per_day[day] >= config.max_schedules_per_day:
            continue

        emitted: List[Slot] = []
        for window in windows_by_day.get(day_of_week(day), []):
            cursor = at_time(day, window.start_time)
            window_end = at_time(day, window.end_time)

            while cursor + duration <= window_end:
                slot_end = cursor + duration
                if cursor >= now and not _is_taken(
                    cursor, slot_end, busy, emitted, buffer_minutes
                ):
                    emitted.append(Slot(id=slot_id(cursor), start=cursor, end=slot_end))
                cursor += step

        emitted.sort(key=lambda slot: slot.start)
        slots.extend(emitted)

    return slots


def _is_taken(
    start: datetime,
    end: datetime,
    busy: Sequence[_Busy],
    emitted: Sequence[Slot],
    buffer_minutes: int,
) -> bool:
    for booking in busy:
        if buffered_overlap(start, end, booking.start_time, booking.end_time, buffer_minutes):
            return True
    # Overlapping weekly windows must not yield overlapping slots
    for slot in emitted:
        if buffered_overlap(start, end, slot.start, slot.end, buffer_minutes):
            return True
    return False


def list_active_bookings(
    session: Session,
    interviewer_id: UUID,
    tenant_id: UUID,
    start: datetime,
    end: datetime,
) -> List[Booking]:
    """Non-cancelled bookings starting within [start, end]."""
    return list(
        session.exec(
            select(Booking)
            .where(
                Booking.interviewer_id == interviewer_id,
                Booking.tenant_id == tenant_id,
                Booking.status.in_(ACTIVE_BOOKING_STATUSES),
                Booking.start_time >= start,
                Booking.start_time <= end,
            )
            .order_by(Booking.start_time)
        ).all()
    )


def generate_slots(
    session: Session,
    interviewer_id: UUID,
    tenant_id: UUID,
    range_start: Optional[datetime] = None,
    range_end: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> List[Slot]:
    """Compute bookable slots for an interviewer in a tenant."""
    now = now or datetime.utcnow()
    get_interviewer(session, interviewer_id, tenant_id)

    config = get_scheduling_settings(session, interviewer_id, tenant_id)
    start, end = resolve_range(config, now, range_start, range_end)
    if end < start:
        return []

    windows = list_weekly_availability(session, interviewer_id, tenant_id)
    blocked = {
        exception.exception_date
        for exception in list_exception_dates(
            session, interviewer_id, tenant_id, start=start.date(), end=end.date()
        )
        if exception.is_blocked
    }
    # One day of margin on both sides so buffers across midnight are honoured
    bookings = list_active_bookings(
        session,
        interviewer_id,
        tenant_id,
        start - timedelta(days=1),
        end + timedelta(days=1),
    )

    slots = compute_slots(config, windows, blocked, bookings, start, end, now)
    logger.debug(
        f"Generated {len(slots)} slots for interviewer {interviewer_id} "
        f"in tenant {tenant_id} between {start} and {end}"
    )
    return slots
