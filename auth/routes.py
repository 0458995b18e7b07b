"""
Auth API routes: login, user creation, current user.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, EmailStr, Field

from auth.dependencies import get_auth_service, get_current_user_id, get_settings
from auth.service import AuthService
from config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Request / response schemas ─────────────────────────────────────────


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class CreateUserRequest(BaseModel):
    name: Optional[str] = None
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginResponse(BaseModel):
    message: str
    token: str


class CreateUserResponse(BaseModel):
    userId: uuid.UUID


class CurrentUserResponse(BaseModel):
    userId: str


class MessageResponse(BaseModel):
    message: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post(
    "/login",
    tags=["Login"],
    summary="Login do usuário",
    response_model=LoginResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse}},
)
async def login(
    req: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
) -> LoginResponse:
    """Login with email + password; the token is also set as a cookie."""
    result = await service.login(req.email, req.password)

    response.set_cookie(
        settings.auth_cookie_name,
        result.token,
        max_age=service.tokens.expiry_seconds,
        path="/",
        httponly=True,
        secure=settings.is_production,
    )
    return LoginResponse(message=result.message, token=result.token)


@router.post(
    "/users",
    tags=["Cadastro"],
    summary="Criação de um novo acesso",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateUserResponse,
    responses={status.HTTP_409_CONFLICT: {"model": MessageResponse}},
)
async def create_user(
    req: CreateUserRequest,
    service: AuthService = Depends(get_auth_service),
) -> CreateUserResponse:
    """Register a new user."""
    user_id = await service.register(req.email, req.password, name=req.name)
    return CreateUserResponse(userId=user_id)


@router.get(
    "/me",
    tags=["Login"],
    summary="Usuário autenticado",
    response_model=CurrentUserResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse}},
)
async def me(user_id: str = Depends(get_current_user_id)) -> CurrentUserResponse:
    return CurrentUserResponse(userId=user_id)
