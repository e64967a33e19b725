from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from interview_scheduler.api.deps import TenantDep
from interview_scheduler.core.errors import ValidationError
from interview_scheduler.db import SessionDep
from interview_scheduler.models import IntervieweeStatus, TenantRole
from interview_scheduler.schemas import (
    IntervieweeCreate,
    IntervieweeNoteCreate,
    IntervieweeNoteRead,
    IntervieweeRead,
    IntervieweeStatusUpdate,
    IntervieweeWithNotes,
)
from interview_scheduler.services.interviewees import (
    create_interviewee,
    get_interviewee,
    list_interviewees,
    list_notes,
)
from interview_scheduler.services.permissions import ensure_tenant_role
from interview_scheduler.services.pipeline import add_note, change_status, record_round_result

router = APIRouter()

MANAGER_ROLES = (TenantRole.ADMIN, TenantRole.HR)
STATUS_EDITOR_ROLES = (TenantRole.ADMIN, TenantRole.HR, TenantRole.INTERVIEWER)


@router.post(
    "/",
    response_model=IntervieweeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add interviewee",
)
def create_interviewee_endpoint(
    payload: IntervieweeCreate,
    session: SessionDep,
    ctx: TenantDep,
) -> IntervieweeRead:
    ensure_tenant_role(ctx.membership, MANAGER_ROLES)
    interviewee = create_interviewee(session, ctx.tenant_id, **payload.model_dump())
    return IntervieweeRead.model_validate(interviewee)


@router.get("/", response_model=List[IntervieweeRead], summary="List interviewees")
def list_interviewees_endpoint(
    session: SessionDep,
    ctx: TenantDep,
    status_filter: Optional[IntervieweeStatus] = Query(default=None, alias="status"),
    search: Optional[str] = Query(default=None, description="Match on name or email"),
) -> List[IntervieweeRead]:
    return [
        IntervieweeRead.model_validate(interviewee)
        for interviewee in list_interviewees(
            session, ctx.tenant_id, status=status_filter, search=search
        )
    ]


@router.get("/{interviewee_id}", response_model=IntervieweeWithNotes, summary="Interviewee details")
def get_interviewee_endpoint(
    interviewee_id: UUID,
    session: SessionDep,
    ctx: TenantDep,
) -> IntervieweeWithNotes:
    interviewee = get_interviewee(session, interviewee_id, ctx.tenant_id)
    return IntervieweeWithNotes(
        **IntervieweeRead.model_validate(interviewee).model_dump(),
        notes=[IntervieweeNoteRead.model_validate(n) for n in list_notes(session, interviewee.id)],
    )


@router.patch(
    "/{interviewee_id}/status",
    response_model=IntervieweeRead,
    summary="Move interviewee through the pipeline",
)
def update_interviewee_status(
    interviewee_id: UUID,
    payload: IntervieweeStatusUpdate,
    session: SessionDep,
    ctx: TenantDep,
) -> IntervieweeRead:
    """Record a round result or change the status manually."""
    ensure_tenant_role(ctx.membership, STATUS_EDITOR_ROLES)
    if (payload.status is None) == (payload.round_result is None):
        raise ValidationError("Provide exactly one of status or round_result")

    interviewee = get_interviewee(session, interviewee_id, ctx.tenant_id)
    if payload.round_result is not None:
        interviewee = record_round_result(
            session, interviewee, payload.round_result, ctx.user, payload.note
        )
    else:
        interviewee = change_status(session, interviewee, payload.status, ctx.user, payload.note)
    return IntervieweeRead.model_validate(interviewee)


@router.post(
    "/{interviewee_id}/notes",
    response_model=IntervieweeNoteRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add note",
)
def add_interviewee_note(
    interviewee_id: UUID,
    payload: IntervieweeNoteCreate,
    session: SessionDep,
    ctx: TenantDep,
) -> IntervieweeNoteRead:
    ensure_tenant_role(ctx.membership, MANAGER_ROLES)
    interviewee = get_interviewee(session, interviewee_id, ctx.tenant_id)
    note = add_note(session, interviewee, ctx.user, payload.content)
    return IntervieweeNoteRead.model_validate(note)
