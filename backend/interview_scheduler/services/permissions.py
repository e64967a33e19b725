from __future__ import annotations

from typing import Iterable, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlmodel import Session, select

from interview_scheduler.core.errors import NotFoundError
from interview_scheduler.models import TenantRole, TenantUser, User


def get_active_membership(
    session: Session,
    user_id: UUID,
    tenant_id: UUID,
    *,
    for_update: bool = False,
) -> Optional[TenantUser]:
    stmt = select(TenantUser).where(
        TenantUser.user_id == user_id,
        TenantUser.tenant_id == tenant_id,
        TenantUser.is_active == True,  # noqa: E712
    )
    if for_update:
        # Serializes admissions for one interviewer on backends with row locks
        stmt = stmt.with_for_update()
    return session.exec(stmt).one_or_none()


def get_interviewer(
    session: Session,
    interviewer_id: UUID,
    tenant_id: UUID,
    *,
    for_update: bool = False,
) -> User:
    """Return the interviewer if they are an active member of the tenant."""
    membership = get_active_membership(
        session, interviewer_id, tenant_id, for_update=for_update
    )
    user = session.get(User, interviewer_id) if membership else None
    if user is None or not user.is_active:
        raise NotFoundError("Interviewer not found")
    return user


def ensure_tenant_role(membership: TenantUser, roles: Iterable[TenantRole]) -> None:
    allowed = set(roles)
    if membership.role not in allowed:
        names = ", ".join(sorted(role.value for role in allowed))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Required role: {names}, but user has: {membership.role.value}",
        )
