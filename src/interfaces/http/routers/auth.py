from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from src.application.use_cases.auth import get_me, login_user
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import (
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from src.interfaces.http.schemas.auth import LoginRequest, LoginResponse, MeResponse

router = APIRouter(prefix="", tags=["auth"])
logger = logging.getLogger(__name__)


@router.get("/me", response_model=MeResponse)
async def read_me(context: AuthContext = Depends(get_auth_context)) -> MeResponse:
    result = await get_me.execute(
        user_id=context.user_id,
        name=context.name,
        role=context.role,
        claims=context.claims,
    )
    return MeResponse(
        user_id=result.user_id,
        name=result.name,
        role=result.role,
        can_log_deliveries=result.can_log_deliveries,
        can_view_reports=result.can_view_reports,
        claims=result.claims,
    )


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    logger.info("User %s logged in as %s", result.user_id, result.role.value)
    return LoginResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        user_id=result.user_id,
        email=result.email,
        name=result.name,
        role=result.role,
    )
