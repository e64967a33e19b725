from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlmodel import Session, or_, select

from interview_scheduler.core.errors import NotFoundError, ValidationError
from interview_scheduler.models import Interviewee, IntervieweeNote, IntervieweeStatus


def create_interviewee(session: Session, tenant_id: UUID, **fields) -> Interviewee:
    name = (fields.pop("name", None) or "").strip()
    email = (fields.pop("email", None) or "").strip().lower()
    if not name or not email:
        raise ValidationError("Interviewee name and email are required")

    existing = session.exec(
        select(Interviewee).where(
            Interviewee.tenant_id == tenant_id, Interviewee.email == email
        )
    ).first()
    if existing:
        raise ValidationError(f"Interviewee with email {email} already exists")

    interviewee = Interviewee(tenant_id=tenant_id, name=name, email=email, **fields)
    session.add(interviewee)
    session.commit()
    session.refresh(interviewee)
    return interviewee


def get_interviewee(session: Session, interviewee_id: UUID, tenant_id: UUID) -> Interviewee:
    interviewee = session.get(Interviewee, interviewee_id)
    if interviewee is None or interviewee.tenant_id != tenant_id:
        raise NotFoundError("Interviewee not found")
    return interviewee


def list_interviewees(
    session: Session,
    tenant_id: UUID,
    *,
    status: Optional[IntervieweeStatus] = None,
    search: Optional[str] = None,
) -> List[Interviewee]:
    stmt = select(Interviewee).where(Interviewee.tenant_id == tenant_id)
    if status is not None:
        stmt = stmt.where(Interviewee.status == status)
    if search:
        pattern = f"%{search.strip()}%"
        stmt = stmt.where(
            or_(Interviewee.name.ilike(pattern), Interviewee.email.ilike(pattern))
        )
    return list(session.exec(stmt.order_by(Interviewee.created_at.desc())).all())


def list_notes(session: Session, interviewee_id: UUID) -> List[IntervieweeNote]:
    return list(
        session.exec(
            select(IntervieweeNote)
            .where(IntervieweeNote.interviewee_id == interviewee_id)
            .order_by(IntervieweeNote.created_at)
        ).all()
    )
