from __future__ import annotations

from fastapi import APIRouter, Body

from interview_scheduler.api.deps import TenantDep
from interview_scheduler.db import SessionDep
from interview_scheduler.schemas import (
    AvailabilityRead,
    AvailabilityUpdate,
    ExceptionDateRead,
    WeeklyAvailabilityRead,
)
from interview_scheduler.services.availability import (
    ExceptionDay,
    WeeklyWindow,
    list_exception_dates,
    list_weekly_availability,
    replace_availability,
)

router = APIRouter()


def _serialize(windows, exceptions) -> AvailabilityRead:
    return AvailabilityRead(
        availability_slots=[WeeklyAvailabilityRead.model_validate(w) for w in windows],
        exception_dates=[ExceptionDateRead.model_validate(e) for e in exceptions],
    )


@router.get("/", response_model=AvailabilityRead, summary="Get my availability")
def get_my_availability(session: SessionDep, ctx: TenantDep) -> AvailabilityRead:
    """Weekly windows and exception dates of the current user in the tenant."""
    return _serialize(
        list_weekly_availability(session, ctx.user.id, ctx.tenant_id),
        list_exception_dates(session, ctx.user.id, ctx.tenant_id),
    )


@router.put("/", response_model=AvailabilityRead, summary="Replace my availability")
def replace_my_availability(
    session: SessionDep,
    ctx: TenantDep,
    payload: AvailabilityUpdate = Body(...),
) -> AvailabilityRead:
    """Replace all weekly windows and exception dates at once."""
    windows, exceptions = replace_availability(
        session,
        ctx.user.id,
        ctx.tenant_id,
        [
            WeeklyWindow(
                day_of_week=slot.day_of_week,
                start_time=slot.start_time,
                end_time=slot.end_time,
            )
            for slot in payload.availability_slots
        ],
        [
            ExceptionDay(exception_date=item.exception_date, is_blocked=item.is_blocked)
            for item in payload.exception_dates
        ],
    )
    return _serialize(windows, exceptions)
