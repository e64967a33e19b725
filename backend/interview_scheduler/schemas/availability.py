from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class WeeklyAvailabilityBase(BaseModel):
    """Weekly window; day_of_week uses 0 = Sunday."""
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday ... 6 = Saturday")
    start_time: str = Field(..., description="Start time in HH:MM format")
    end_time: str = Field(..., description="End time in HH:MM format")


class WeeklyAvailabilityRead(WeeklyAvailabilityBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)


class ExceptionDateBase(BaseModel):
    exception_date: date
    is_blocked: bool = True


class ExceptionDateRead(ExceptionDateBase):
    id: UUID

    model_config = ConfigDict(from_attributes=True)


class AvailabilityUpdate(BaseModel):
    """Full replacement of weekly windows and exception dates."""
    availability_slots: list[WeeklyAvailabilityBase] = Field(default_factory=list)
    exception_dates: list[ExceptionDateBase] = Field(default_factory=list)


class AvailabilityRead(BaseModel):
    availability_slots: list[WeeklyAvailabilityRead]
    exception_dates: list[ExceptionDateRead]
