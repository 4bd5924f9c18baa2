from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.role import Role
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True)
class LoginResult:
    access_token: str
    token_type: str
    user_id: UUID
    email: str
    name: str
    role: Role


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> LoginResult:
    user = await uow.users.get_by_email(payload.email.lower())
    hashed = user.hashed_password if user and user.is_active else None
    if not password_hasher.verify(payload.password, hashed) or user is None:
        raise AuthError("Invalid credentials")

    token = jwt_service.create_access_token(
        subject=user.id,
        extra_claims={"name": user.name, "role": user.role.value},
    )
    return LoginResult(
        access_token=token,
        token_type="bearer",
        user_id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
    )
