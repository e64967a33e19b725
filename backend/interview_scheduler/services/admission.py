"""
Booking Admission Controller

Validates a booking request against live state and commits it. The checks
run in a fixed order and each one rejects without side effects:

1. Interviewer is an active member of the tenant      -> NotFoundError
2. Daily cap not reached on the booking's day         -> CapacityExceededError
3. No non-cancelled booking intersects the interval   -> SlotConflictError
4. Linked interviewee is in a bookable pipeline state -> InvalidStateError

Checks and insert happen under a per-interviewer, per-day lock and inside a
single transaction, so two overlapping requests cannot both be admitted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional
from uuid import UUID

from sqlmodel import Session, func, select

from interview_scheduler.core.config import settings
from interview_scheduler.core.errors import (
    CapacityExceededError,
    InvalidStateError,
    NotFoundError,
    SchedulingError,
    SlotConflictError,
    ValidationError,
)
from interview_scheduler.core.locks import booking_lock
from interview_scheduler.models import (
    ACTIVE_BOOKING_STATUSES,
    BOOKABLE_INTERVIEWEE_STATUSES,
    Booking,
    BookingStatus,
    Interviewee,
    User,
)
from interview_scheduler.services.intervals import day_bounds, days_spanned
from interview_scheduler.services.permissions import get_interviewer
from interview_scheduler.services.pipeline import apply_booking_transition
from interview_scheduler.services.scheduling_settings import get_scheduling_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingRequest:
    interviewer_id: UUID
    tenant_id: UUID
    start: datetime
    end: datetime
    interviewee_name: str
    interviewee_email: str
    interviewee_id: Optional[UUID] = None
    title: Optional[str] = None


def _validate_request(request: BookingRequest, now: datetime) -> None:
    if not request.interviewee_name or not request.interviewee_name.strip():
        raise ValidationError("Interviewee name is required")
    if not request.interviewee_email or not request.interviewee_email.strip():
        raise ValidationError("Interviewee email is required")
    if request.end <= request.start:
        raise ValidationError("End time must be after start time")
    if request.start < now:
        raise ValidationError("Cannot book a time in the past")


def count_active_bookings_on_day(
    session: Session, interviewer_id: UUID, tenant_id: UUID, start: datetime
) -> int:
    day_start, day_end = day_bounds(start.date())
    return session.exec(
        select(func.count())
        .select_from(Booking)
        .where(
            Booking.interviewer_id == interviewer_id,
            Booking.tenant_id == tenant_id,
            Booking.status.in_(ACTIVE_BOOKING_STATUSES),
            Booking.start_time >= day_start,
            Booking.start_time <= day_end,
        )
    ).one()


def find_conflicting_booking(
    session: Session,
    interviewer_id: UUID,
    tenant_id: UUID,
    start: datetime,
    end: datetime,
    buffer_minutes: int = 0,
) -> Optional[Booking]:
    """First non-cancelled booking intersecting [start, end).

    Covers a request starting inside, ending inside, or containing an existing
    booking. With ``buffer_minutes`` the existing booking is widened first.
    """
    buffer = timedelta(minutes=buffer_minutes)
    return session.exec(
        select(Booking)
        .where(
            Booking.interviewer_id == interviewer_id,
            Booking.tenant_id == tenant_id,
            Booking.status.in_(ACTIVE_BOOKING_STATUSES),
            Booking.start_time < end + buffer,
            Booking.end_time > start - buffer,
        )
        .order_by(Booking.start_time)
    ).first()


def _resolve_interviewee(
    session: Session, request: BookingRequest
) -> Optional[Interviewee]:
    if request.interviewee_id:
        interviewee = session.get(Interviewee, request.interviewee_id)
        if interviewee is None or interviewee.tenant_id != request.tenant_id:
            raise NotFoundError("Interviewee not found")
        return interviewee

    return session.exec(
        select(Interviewee).where(
            Interviewee.tenant_id == request.tenant_id,
            Interviewee.email == request.interviewee_email.strip().lower(),
        )
    ).first()


def _admit_locked(session: Session, request: BookingRequest) -> Booking:
    interviewer = get_interviewer(
        session, request.interviewer_id, request.tenant_id, for_update=True
    )
    config = get_scheduling_settings(session, request.interviewer_id, request.tenant_id)

    booked = count_active_bookings_on_day(
        session, request.interviewer_id, request.tenant_id, request.start
    )
    if booked >= config.max_schedules_per_day:
        raise CapacityExceededError("Maximum number of bookings reached for this day")

    buffer_minutes = (
        config.buffer_between_events if settings.APPLY_BUFFER_AT_ADMISSION else 0
    )
    conflict = find_conflicting_booking(
        session,
        request.interviewer_id,
        request.tenant_id,
        request.start,
        request.end,
        buffer_minutes,
    )
    if conflict is not None:
        raise SlotConflictError("This time slot is already booked")

    interviewee = _resolve_interviewee(session, request)
    if interviewee is not None and interviewee.status not in BOOKABLE_INTERVIEWEE_STATUSES:
        raise InvalidStateError(
            "Booking is only allowed for interviewees in CONTACTED, SCHEDULED "
            "or IN_PROGRESS status"
        )

    name = request.interviewee_name.strip()
    booking = Booking(
        interviewer_id=request.interviewer_id,
        tenant_id=request.tenant_id,
        interviewee_id=interviewee.id if interviewee else None,
        title=request.title or f"Interview with {name}",
        interviewee_name=name,
        interviewee_email=request.interviewee_email.strip().lower(),
        start_time=request.start,
        end_time=request.end,
        status=BookingStatus.CONFIRMED,
    )
    session.add(booking)
    session.flush()

    if interviewee is not None:
        apply_booking_transition(session, interviewee, interviewer, request.start)

    session.commit()
    session.refresh(booking)
    return booking


def admit_booking(
    session: Session, request: BookingRequest, now: Optional[datetime] = None
) -> Booking:
    """Validate and persist a booking, or raise a SchedulingError."""
    now = now or datetime.utcnow()
    _validate_request(request, now)

    with booking_lock(
        request.interviewer_id,
        request.tenant_id,
        days_spanned(request.start, request.end),
    ):
        try:
            booking = _admit_locked(session, request)
        except SchedulingError as exc:
            session.rollback()
            logger.info(
                f"Booking rejected ({exc.code}) for interviewer {request.interviewer_id} "
                f"in tenant {request.tenant_id} at {request.start}: {exc.message}"
            )
            raise
        except Exception:
            session.rollback()
            raise

    logger.info(
        f"Booking {booking.id} admitted for interviewer {booking.interviewer_id} "
        f"in tenant {booking.tenant_id}: {booking.start_time} - {booking.end_time}"
    )
    return booking


def cancel_booking(session: Session, booking: Booking, actor: User) -> Booking:
    if booking.status == BookingStatus.CANCELLED:
        raise InvalidStateError("Booking is already cancelled")

    booking.status = BookingStatus.CANCELLED
    booking.cancelled_at = datetime.utcnow()
    session.add(booking)
    session.commit()
    session.refresh(booking)

    logger.info(f"Booking {booking.id} cancelled by user {actor.id}")
    return booking


def get_booking(session: Session, booking_id: UUID, tenant_id: UUID) -> Booking:
    booking = session.get(Booking, booking_id)
    if booking is None or booking.tenant_id != tenant_id:
        raise NotFoundError("Booking not found")
    return booking


def list_bookings(
    session: Session,
    user: User,
    tenant_id: UUID,
    role: str = "interviewer",
    status: Optional[BookingStatus] = None,
) -> List[Booking]:
    stmt = select(Booking).where(Booking.tenant_id == tenant_id)
    if role == "interviewer":
        stmt = stmt.where(Booking.interviewer_id == user.id)
    else:
        stmt = stmt.where(Booking.interviewee_email == user.email.lower())
    if status is not None:
        stmt = stmt.where(Booking.status == status)
    return list(session.exec(stmt.order_by(Booking.start_time)).all())
