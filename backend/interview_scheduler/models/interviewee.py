from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from .enums import IntervieweeStatus


class Interviewee(SQLModel, table=True):
    """A candidate moving through a tenant's hiring pipeline."""

    __tablename__ = "interviewees"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True)
    phone: Optional[str] = Field(default=None, max_length=50)
    resume_link: Optional[str] = Field(default=None, max_length=500)
    current_company: Optional[str] = Field(default=None, max_length=255)
    years_of_experience: Optional[int] = Field(default=None)
    skills: Optional[str] = Field(default=None, max_length=1000)
    current_location: Optional[str] = Field(default=None, max_length=255)
    status: IntervieweeStatus = Field(default=IntervieweeStatus.NEW, index=True)
    current_round: int = Field(default=0)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()


class IntervieweeNote(SQLModel, table=True):
    """Append-only audit note on an interviewee."""

    __tablename__ = "interviewee_notes"

    id: UUID = Field(default_factory=uuid4, primary_key=True, index=True)
    interviewee_id: UUID = Field(
        foreign_key="interviewees.id", nullable=False, index=True
    )
    author_id: Optional[UUID] = Field(
        default=None, foreign_key="users.id", nullable=True
    )
    content: str = Field(max_length=4000)
    is_system: bool = Field(default=False)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
