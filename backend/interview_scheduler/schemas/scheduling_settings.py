from __future__ import annotations

from pydantic import BaseModel, Field


class SchedulingSettingsBase(BaseModel):
    meeting_duration: int = Field(..., ge=5, description="Meeting length in minutes")
    buffer_between_events: int = Field(..., ge=0, description="Gap kept around bookings, minutes")
    max_schedules_per_day: int = Field(..., ge=1)
    advance_booking_days: int = Field(..., ge=1)


class SchedulingSettingsUpdate(SchedulingSettingsBase):
    pass


class SchedulingSettingsRead(SchedulingSettingsBase):
    is_default: bool = Field(default=False, description="True when no settings were saved yet")
