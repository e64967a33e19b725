from __future__ import annotations

from typing import Annotated, List, Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Header, HTTPException, Query, status

from interview_scheduler.api.deps import TenantDep
from interview_scheduler.core.errors import ValidationError
from interview_scheduler.db import SessionDep
from interview_scheduler.models import BookingStatus, TenantRole
from interview_scheduler.schemas import BookingCreate, BookingRead
from interview_scheduler.services.admission import (
    BookingRequest,
    admit_booking,
    cancel_booking,
    get_booking,
    list_bookings,
)
from interview_scheduler.services.intervals import to_naive_utc

router = APIRouter()


@router.post(
    "/",
    response_model=BookingRead,
    status_code=status.HTTP_201_CREATED,
    summary="Book an interview slot",
)
def create_booking(
    payload: BookingCreate,
    session: SessionDep,
    x_tenant_id: Annotated[UUID | None, Header()] = None,
) -> BookingRead:
    """Public booking submission; re-validated against live bookings."""
    tenant_id = payload.tenant_id or x_tenant_id
    if tenant_id is None:
        raise ValidationError("tenant_id is required")

    booking = admit_booking(
        session,
        BookingRequest(
            interviewer_id=payload.interviewer_id,
            tenant_id=tenant_id,
            start=to_naive_utc(payload.start_time),
            end=to_naive_utc(payload.end_time),
            interviewee_name=payload.interviewee_name,
            interviewee_email=payload.interviewee_email,
            interviewee_id=payload.interviewee_id,
            title=payload.title,
        ),
    )
    return BookingRead.model_validate(booking)


@router.get("/", response_model=List[BookingRead], summary="List my bookings")
def list_my_bookings(
    session: SessionDep,
    ctx: TenantDep,
    role: Literal["interviewer", "interviewee"] = Query(default="interviewer"),
    status_filter: Optional[BookingStatus] = Query(default=None, alias="status"),
) -> List[BookingRead]:
    return [
        BookingRead.model_validate(booking)
        for booking in list_bookings(session, ctx.user, ctx.tenant_id, role, status_filter)
    ]


@router.post("/{booking_id}/cancel", response_model=BookingRead, summary="Cancel booking")
def cancel_booking_endpoint(
    booking_id: UUID,
    session: SessionDep,
    ctx: TenantDep,
) -> BookingRead:
    booking = get_booking(session, booking_id, ctx.tenant_id)
    if booking.interviewer_id != ctx.user.id and ctx.membership.role not in (
        TenantRole.ADMIN,
        TenantRole.HR,
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the interviewer or tenant ADMIN/HR can cancel this booking",
        )
    return BookingRead.model_validate(cancel_booking(session, booking, ctx.user))
