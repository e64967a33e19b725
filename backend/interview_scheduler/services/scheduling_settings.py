"""Settings store: per-interviewer booking rules with documented defaults."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlmodel import Session

from interview_scheduler.core.errors import ValidationError
from interview_scheduler.models import SchedulingSettings

DEFAULT_MEETING_DURATION = 30
DEFAULT_BUFFER_BETWEEN_EVENTS = 15
DEFAULT_MAX_SCHEDULES_PER_DAY = 3
DEFAULT_ADVANCE_BOOKING_DAYS = 30


@dataclass(frozen=True)
class SchedulingConfig:
    """Effective booking rules; every field is always set."""

    meeting_duration: int = DEFAULT_MEETING_DURATION
    buffer_between_events: int = DEFAULT_BUFFER_BETWEEN_EVENTS
    max_schedules_per_day: int = DEFAULT_MAX_SCHEDULES_PER_DAY
    advance_booking_days: int = DEFAULT_ADVANCE_BOOKING_DAYS
    is_default: bool = False

    @classmethod
    def from_row(cls, row: SchedulingSettings) -> "SchedulingConfig":
        return cls(
            meeting_duration=row.meeting_duration,
            buffer_between_events=row.buffer_between_events,
            max_schedules_per_day=row.max_schedules_per_day,
            advance_booking_days=row.advance_booking_days,
        )

    def validate(self) -> None:
        if self.meeting_duration < 5:
            raise ValidationError("Meeting duration must be at least 5 minutes")
        if self.buffer_between_events < 0:
            raise ValidationError("Buffer between events cannot be negative")
        if self.max_schedules_per_day < 1:
            raise ValidationError("Max schedules per day must be at least 1")
        if self.advance_booking_days < 1:
            raise ValidationError("Advance booking days must be at least 1")


def get_scheduling_settings(
    session: Session, user_id: UUID, tenant_id: UUID
) -> SchedulingConfig:
    row = session.get(SchedulingSettings, (user_id, tenant_id))
    if row is None:
        return SchedulingConfig(is_default=True)
    return SchedulingConfig.from_row(row)


def save_scheduling_settings(
    session: Session,
    user_id: UUID,
    tenant_id: UUID,
    config: SchedulingConfig,
    *,
    commit: bool = True,
) -> SchedulingSettings:
    """Upsert the settings row for (user, tenant)."""
    config.validate()

    row = session.get(SchedulingSettings, (user_id, tenant_id))
    if row is None:
        row = SchedulingSettings(user_id=user_id, tenant_id=tenant_id)
    row.meeting_duration = config.meeting_duration
    row.buffer_between_events = config.buffer_between_events
    row.max_schedules_per_day = config.max_schedules_per_day
    row.advance_booking_days = config.advance_booking_days
    row.updated_at = datetime.utcnow()

    session.add(row)
    if commit:
        session.commit()
        session.refresh(row)
    return row
