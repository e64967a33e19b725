from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlmodel import select

from interview_scheduler.core.config import settings
from interview_scheduler.core.security import verify_token
from interview_scheduler.db import SessionDep
from interview_scheduler.models import TenantUser, User
from interview_scheduler.services.permissions import get_active_membership

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")


def get_current_user(
    session: SessionDep,
    token: str = Depends(oauth2_scheme),
) -> User:
    try:
        payload = verify_token(token, token_type="access")
        user_id = UUID(payload.get("sub") or "")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None

    user = session.exec(select(User).where(User.id == user_id)).one_or_none()
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Inactive or missing user",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


@dataclass
class TenantContext:
    """The tenant a request acts in, named explicitly by the caller."""

    tenant_id: UUID
    user: User
    membership: TenantUser


def get_tenant_context(
    session: SessionDep,
    current_user: CurrentUser,
    x_tenant_id: Annotated[UUID | None, Header()] = None,
) -> TenantContext:
    if x_tenant_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Tenant-ID header is required",
        )
    membership = get_active_membership(session, current_user.id, x_tenant_id)
    if membership is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You are not a member of this tenant",
        )
    return TenantContext(tenant_id=x_tenant_id, user=current_user, membership=membership)


TenantDep = Annotated[TenantContext, Depends(get_tenant_context)]
