from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from interview_scheduler.models import IntervieweeStatus, RoundResult


class IntervieweeBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=50)
    resume_link: Optional[str] = Field(default=None, max_length=500)
    current_company: Optional[str] = Field(default=None, max_length=255)
    years_of_experience: Optional[int] = Field(default=None, ge=0)
    skills: Optional[str] = Field(default=None, max_length=1000)
    current_location: Optional[str] = Field(default=None, max_length=255)


class IntervieweeCreate(IntervieweeBase):
    pass


class IntervieweeRead(IntervieweeBase):
    id: UUID
    tenant_id: UUID
    status: IntervieweeStatus
    current_round: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class IntervieweeNoteCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=4000)


class IntervieweeNoteRead(BaseModel):
    id: UUID
    interviewee_id: UUID
    author_id: Optional[UUID] = None
    content: str
    is_system: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class IntervieweeWithNotes(IntervieweeRead):
    notes: list[IntervieweeNoteRead] = []


class IntervieweeStatusUpdate(BaseModel):
    """Either a manual status move or a round result (not both)."""
    status: Optional[IntervieweeStatus] = None
    round_result: Optional[RoundResult] = None
    note: Optional[str] = Field(default=None, max_length=4000)
