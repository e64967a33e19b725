from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query

from interview_scheduler.db import SessionDep
from interview_scheduler.schemas import AvailableSlotsResponse, InterviewerInfo, SlotRead
from interview_scheduler.services.permissions import get_interviewer
from interview_scheduler.services.scheduling_settings import get_scheduling_settings
from interview_scheduler.services.slots import generate_slots

router = APIRouter()


@router.get(
    "/{user_id}",
    response_model=AvailableSlotsResponse,
    summary="List bookable slots of an interviewer",
)
def list_available_slots(
    user_id: UUID,
    session: SessionDep,
    tenant_id: UUID = Query(..., description="Tenant the interviewer books for"),
    start_date: Optional[date] = Query(default=None, description="First day, defaults to today"),
    end_date: Optional[date] = Query(default=None, description="Last day, defaults to two weeks ahead"),
) -> AvailableSlotsResponse:
    """Public endpoint used by the booking page; no authentication."""
    interviewer = get_interviewer(session, user_id, tenant_id)
    config = get_scheduling_settings(session, user_id, tenant_id)

    slots = generate_slots(
        session,
        user_id,
        tenant_id,
        range_start=datetime.combine(start_date, time.min) if start_date else None,
        range_end=datetime.combine(end_date, time.min) if end_date else None,
    )

    return AvailableSlotsResponse(
        interviewer=InterviewerInfo(
            id=interviewer.id,
            name=interviewer.full_name,
            email=interviewer.email,
            meeting_duration=config.meeting_duration,
        ),
        available_slots=[
            SlotRead(id=slot.id, start_time=slot.start, end_time=slot.end) for slot in slots
        ],
    )
