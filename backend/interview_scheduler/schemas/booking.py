from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from interview_scheduler.models import BookingStatus


class BookingCreate(BaseModel):
    """Public booking submission for one slot."""
    interviewer_id: UUID
    tenant_id: Optional[UUID] = Field(
        default=None, description="Tenant; falls back to the X-Tenant-ID header"
    )
    start_time: datetime
    end_time: datetime
    interviewee_name: str = Field(..., min_length=1, max_length=255)
    interviewee_email: EmailStr
    interviewee_id: Optional[UUID] = None
    title: Optional[str] = Field(default=None, max_length=255)


class BookingRead(BaseModel):
    id: UUID
    interviewer_id: UUID
    tenant_id: UUID
    interviewee_id: Optional[UUID] = None
    title: str
    interviewee_name: str
    interviewee_email: str
    start_time: datetime
    end_time: datetime
    status: BookingStatus
    created_at: datetime
    cancelled_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SlotRead(BaseModel):
    id: str
    start_time: datetime
    end_time: datetime


class InterviewerInfo(BaseModel):
    id: UUID
    name: Optional[str] = None
    email: str
    meeting_duration: int


class AvailableSlotsResponse(BaseModel):
    interviewer: InterviewerInfo
    available_slots: list[SlotRead]
