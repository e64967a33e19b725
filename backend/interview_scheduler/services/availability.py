"""Availability store: weekly windows and exception dates per (user, tenant)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Sequence
from uuid import UUID

from sqlmodel import Session, delete, select

from interview_scheduler.core.errors import ValidationError
from interview_scheduler.models import ExceptionDate, WeeklyAvailability
from interview_scheduler.services.intervals import parse_hhmm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeeklyWindow:
    day_of_week: int
    start_time: str
    end_time: str


@dataclass(frozen=True)
class ExceptionDay:
    exception_date: date
    is_blocked: bool = True


def _validate_window(window: WeeklyWindow) -> None:
    if not 0 <= window.day_of_week <= 6:
        raise ValidationError(
            f"day_of_week must be between 0 and 6, got {window.day_of_week}"
        )
    if parse_hhmm(window.end_time) <= parse_hhmm(window.start_time):
        raise ValidationError(
            f"Availability end {window.end_time} must be after start {window.start_time}"
        )


def list_weekly_availability(
    session: Session, user_id: UUID, tenant_id: UUID
) -> List[WeeklyAvailability]:
    rows = session.exec(
        select(WeeklyAvailability).where(
            WeeklyAvailability.user_id == user_id,
            WeeklyAvailability.tenant_id == tenant_id,
        )
    ).all()
    # HH:MM strings are not zero-padded consistently, so sort on parsed times
    return sorted(rows, key=lambda row: (row.day_of_week, parse_hhmm(row.start_time)))


def list_exception_dates(
    session: Session,
    user_id: UUID,
    tenant_id: UUID,
    *,
    start: date | None = None,
    end: date | None = None,
) -> List[ExceptionDate]:
    stmt = select(ExceptionDate).where(
        ExceptionDate.user_id == user_id,
        ExceptionDate.tenant_id == tenant_id,
    )
    if start:
        stmt = stmt.where(ExceptionDate.exception_date >= start)
    if end:
        stmt = stmt.where(ExceptionDate.exception_date <= end)
    return list(session.exec(stmt.order_by(ExceptionDate.exception_date)).all())


def replace_availability(
    session: Session,
    user_id: UUID,
    tenant_id: UUID,
    windows: Sequence[WeeklyWindow],
    exceptions: Iterable[ExceptionDay],
) -> tuple[List[WeeklyAvailability], List[ExceptionDate]]:
    """Replace all weekly windows and exception dates in one transaction."""
    exceptions = list(exceptions)
    for window in windows:
        _validate_window(window)

    try:
        session.exec(
            delete(WeeklyAvailability).where(
                WeeklyAvailability.user_id == user_id,
                WeeklyAvailability.tenant_id == tenant_id,
            )
        )
        session.exec(
            delete(ExceptionDate).where(
                ExceptionDate.user_id == user_id,
                ExceptionDate.tenant_id == tenant_id,
            )
        )

        new_windows = [
            WeeklyAvailability(
                user_id=user_id,
                tenant_id=tenant_id,
                day_of_week=window.day_of_week,
                start_time=window.start_time,
                end_time=window.end_time,
            )
            for window in windows
        ]
        new_exceptions = [
            ExceptionDate(
                user_id=user_id,
                tenant_id=tenant_id,
                exception_date=exception.exception_date,
                is_blocked=exception.is_blocked,
            )
            for exception in exceptions
        ]
        session.add_all(new_windows)
        session.add_all(new_exceptions)
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(
        f"Availability replaced for user {user_id} in tenant {tenant_id}: "
        f"{len(new_windows)} weekly windows, {len(new_exceptions)} exception dates"
    )
    return (
        list_weekly_availability(session, user_id, tenant_id),
        list_exception_dates(session, user_id, tenant_id),
    )
