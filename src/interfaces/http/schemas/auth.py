from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr

from src.domain.value_objects.role import Role


class MeResponse(BaseModel):
    user_id: UUID
    name: str
    role: Role
    can_log_deliveries: bool
    can_view_reports: bool
    claims: dict[str, Any]


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str
    user_id: UUID
    email: EmailStr
    name: str
    role: Role
