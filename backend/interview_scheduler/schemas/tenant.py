from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from interview_scheduler.models import TenantRole


class TenantBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    domain: Optional[str] = Field(default=None, max_length=255)
    logo: Optional[str] = Field(default=None, max_length=500)


class TenantCreate(TenantBase):
    pass


class TenantUpdate(BaseModel):
    """Schema for partial tenant updates."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    domain: Optional[str] = Field(default=None, max_length=255)
    logo: Optional[str] = Field(default=None, max_length=500)
    active: Optional[bool] = None


class TenantRead(TenantBase):
    id: UUID
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TenantReadWithRole(TenantRead):
    role: TenantRole


class TenantMemberCreate(BaseModel):
    email: EmailStr
    role: TenantRole = TenantRole.INTERVIEWER


class TenantMemberRead(BaseModel):
    user_id: UUID
    tenant_id: UUID
    role: TenantRole
    is_active: bool

    model_config = ConfigDict(from_attributes=True)
