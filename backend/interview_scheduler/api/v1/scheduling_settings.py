from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from interview_scheduler.api.deps import TenantDep
from interview_scheduler.db import SessionDep
from interview_scheduler.schemas import SchedulingSettingsRead, SchedulingSettingsUpdate
from interview_scheduler.services.scheduling_settings import (
    SchedulingConfig,
    get_scheduling_settings,
    save_scheduling_settings,
)

router = APIRouter()


@router.get("/", response_model=SchedulingSettingsRead, summary="Get my scheduling settings")
def get_my_settings(session: SessionDep, ctx: TenantDep) -> SchedulingSettingsRead:
    """Saved settings, or the defaults when nothing was saved yet."""
    config = get_scheduling_settings(session, ctx.user.id, ctx.tenant_id)
    return SchedulingSettingsRead(**asdict(config))


@router.put("/", response_model=SchedulingSettingsRead, summary="Save my scheduling settings")
def save_my_settings(
    payload: SchedulingSettingsUpdate,
    session: SessionDep,
    ctx: TenantDep,
) -> SchedulingSettingsRead:
    row = save_scheduling_settings(
        session, ctx.user.id, ctx.tenant_id, SchedulingConfig(**payload.model_dump())
    )
    return SchedulingSettingsRead(**asdict(SchedulingConfig.from_row(row)))
