from __future__ import annotations

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import Session, select

from interview_scheduler.core.errors import NotFoundError, ValidationError
from interview_scheduler.models import (
    SchedulingSettings,
    Tenant,
    TenantRole,
    TenantUser,
    User,
)

logger = logging.getLogger(__name__)


def create_tenant(
    session: Session,
    owner: User,
    name: str,
    domain: Optional[str] = None,
    logo: Optional[str] = None,
) -> Tenant:
    """Create a tenant; the owner becomes ADMIN with default scheduling settings."""
    if not name or not name.strip():
        raise ValidationError("Tenant name is required")

    tenant = Tenant(name=name.strip(), domain=domain, logo=logo)
    session.add(tenant)
    session.flush()

    session.add(TenantUser(user_id=owner.id, tenant_id=tenant.id, role=TenantRole.ADMIN))
    session.add(SchedulingSettings(user_id=owner.id, tenant_id=tenant.id))
    session.commit()
    session.refresh(tenant)

    logger.info(f"Tenant {tenant.id} created by user {owner.id}")
    return tenant


def list_user_tenants(session: Session, user_id: UUID) -> List[Tuple[Tenant, TenantUser]]:
    rows = session.exec(
        select(Tenant, TenantUser)
        .join(TenantUser, TenantUser.tenant_id == Tenant.id)
        .where(TenantUser.user_id == user_id, TenantUser.is_active == True)  # noqa: E712
        .order_by(Tenant.name.asc())
    ).all()
    return list(rows)


def add_member(
    session: Session, tenant_id: UUID, email: str, role: TenantRole
) -> TenantUser:
    user = session.exec(select(User).where(User.email == email.lower())).one_or_none()
    if user is None:
        raise NotFoundError("User not found")

    membership = session.get(TenantUser, (user.id, tenant_id))
    if membership is None:
        membership = TenantUser(user_id=user.id, tenant_id=tenant_id, role=role)
    else:
        membership.role = role
        membership.is_active = True
    session.add(membership)
    session.commit()
    session.refresh(membership)

    logger.info(f"User {user.id} joined tenant {tenant_id} as {role.value}")
    return membership
