from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from interview_scheduler.api.deps import CurrentUser
from interview_scheduler.db import SessionDep
from interview_scheduler.models import Tenant, TenantRole
from interview_scheduler.schemas import (
    TenantCreate,
    TenantMemberCreate,
    TenantMemberRead,
    TenantRead,
    TenantReadWithRole,
    TenantUpdate,
)
from interview_scheduler.services.permissions import ensure_tenant_role, get_active_membership
from interview_scheduler.services.tenants import add_member, create_tenant, list_user_tenants

router = APIRouter()


def _require_membership(session: SessionDep, tenant_id: UUID, current_user: CurrentUser):
    membership = get_active_membership(session, current_user.id, tenant_id)
    if membership is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tenant not found")
    return membership


@router.post(
    "/",
    response_model=TenantRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create tenant",
)
def create_tenant_endpoint(
    payload: TenantCreate,
    session: SessionDep,
    current_user: CurrentUser,
) -> TenantRead:
    """Create a tenant; the creator becomes its ADMIN."""
    tenant = create_tenant(
        session, current_user, payload.name, domain=payload.domain, logo=payload.logo
    )
    return TenantRead.model_validate(tenant)


@router.get("/", response_model=List[TenantReadWithRole], summary="List my tenants")
def list_tenants(session: SessionDep, current_user: CurrentUser) -> List[TenantReadWithRole]:
    return [
        TenantReadWithRole(
            **TenantRead.model_validate(tenant).model_dump(), role=membership.role
        )
        for tenant, membership in list_user_tenants(session, current_user.id)
    ]


@router.get("/{tenant_id}", response_model=TenantRead, summary="Get tenant by ID")
def get_tenant(tenant_id: UUID, session: SessionDep, current_user: CurrentUser) -> TenantRead:
    _require_membership(session, tenant_id, current_user)
    tenant = session.get(Tenant, tenant_id)
    if not tenant:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tenant not found")
    return TenantRead.model_validate(tenant)


@router.patch("/{tenant_id}", response_model=TenantRead, summary="Update tenant")
def update_tenant(
    tenant_id: UUID,
    payload: TenantUpdate,
    session: SessionDep,
    current_user: CurrentUser,
) -> TenantRead:
    membership = _require_membership(session, tenant_id, current_user)
    ensure_tenant_role(membership, [TenantRole.ADMIN])

    tenant = session.get(Tenant, tenant_id)
    if not tenant:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tenant not found")

    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(tenant, field, value)
    tenant.touch()
    session.add(tenant)
    session.commit()
    session.refresh(tenant)
    return TenantRead.model_validate(tenant)


@router.post(
    "/{tenant_id}/members",
    response_model=TenantMemberRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add member to tenant",
)
def add_tenant_member(
    tenant_id: UUID,
    payload: TenantMemberCreate,
    session: SessionDep,
    current_user: CurrentUser,
) -> TenantMemberRead:
    membership = _require_membership(session, tenant_id, current_user)
    ensure_tenant_role(membership, [TenantRole.ADMIN])
    member = add_member(session, tenant_id, payload.email, payload.role)
    return TenantMemberRead.model_validate(member)
