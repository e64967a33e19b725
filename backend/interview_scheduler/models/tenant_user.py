from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlmodel import Field, SQLModel

from .enums import TenantRole


class TenantUser(SQLModel, table=True):
    """Membership of a user in a tenant, with the user's role there."""

    __tablename__ = "tenant_users"
    __table_args__ = {"sqlite_autoincrement": False}

    user_id: UUID = Field(
        foreign_key="users.id", primary_key=True, nullable=False, index=True
    )
    tenant_id: UUID = Field(
        foreign_key="tenants.id", primary_key=True, nullable=False, index=True
    )
    role: TenantRole = Field(default=TenantRole.USER)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
