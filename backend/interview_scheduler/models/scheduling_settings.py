from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlmodel import Field, SQLModel


class SchedulingSettings(SQLModel, table=True):
    """Per-interviewer, per-tenant booking rules."""

    __tablename__ = "scheduling_settings"
    __table_args__ = {"sqlite_autoincrement": False}

    user_id: UUID = Field(foreign_key="users.id", primary_key=True, nullable=False)
    tenant_id: UUID = Field(foreign_key="tenants.id", primary_key=True, nullable=False)
    meeting_duration: int = Field(default=30)  # minutes
    buffer_between_events: int = Field(default=15)  # minutes
    max_schedules_per_day: int = Field(default=3)
    advance_booking_days: int = Field(default=30)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
