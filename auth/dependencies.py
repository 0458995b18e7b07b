"""
FastAPI dependencies for authentication.

The store, token issuer and settings are built once in the app lifespan
and kept on ``app.state``; these dependencies hand them to routes.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.errors import InvalidToken
from auth.service import AuthService
from auth.tokens import TokenIssuer
from config.settings import Settings

_bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_auth_service(request: Request) -> AuthService:
    return AuthService(
        store=request.app.state.user_store,
        tokens=request.app.state.token_issuer,
    )


async def get_current_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Verify the caller's token and return the authenticated ``user_id``.

    The ``Authorization: Bearer`` header wins; otherwise the auth cookie
    set by ``/login`` is used.
    """
    token = credentials.credentials if credentials else request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise InvalidToken("Missing bearer token.")
    return tokens.verify(token)
