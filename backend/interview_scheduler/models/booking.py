from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from .enums import BookingStatus


class Booking(SQLModel, table=True):
    """An interview booked on an interviewer's calendar."""

    __tablename__ = "bookings"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    interviewer_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    interviewee_id: Optional[UUID] = Field(
        default=None, foreign_key="interviewees.id", nullable=True, index=True
    )
    title: str = Field(max_length=255)
    interviewee_name: str = Field(max_length=255)
    interviewee_email: str = Field(max_length=255)
    start_time: datetime = Field(nullable=False, index=True)
    end_time: datetime = Field(nullable=False, index=True)
    status: BookingStatus = Field(default=BookingStatus.CONFIRMED, index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    cancelled_at: Optional[datetime] = Field(default=None, nullable=True)
