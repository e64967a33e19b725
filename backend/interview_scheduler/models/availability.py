from __future__ import annotations

from datetime import date
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class WeeklyAvailability(SQLModel, table=True):
    """Recurring weekly window in which an interviewer takes interviews."""

    __tablename__ = "weekly_availability"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    # 0 = Sunday ... 6 = Saturday
    day_of_week: int = Field(nullable=False, ge=0, le=6)
    # "HH:MM"
    start_time: str = Field(max_length=5)
    end_time: str = Field(max_length=5)


class ExceptionDate(SQLModel, table=True):
    """A calendar day overriding the weekly availability."""

    __tablename__ = "exception_dates"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    exception_date: date = Field(nullable=False, index=True)
    is_blocked: bool = Field(default=True)
