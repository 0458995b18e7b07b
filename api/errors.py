"""
Exception handlers that render failures as ``{"message": ...}`` bodies.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from auth.errors import AuthError

logger = logging.getLogger(__name__)


def _detail_from_validation(exc: RequestValidationError) -> str:
    errors = exc.errors() or []
    if not errors:
        return "Request validation failed."
    first = errors[0]
    field = ".".join(str(x) for x in first.get("loc", []) if x != "body")
    msg = first.get("msg") or "Invalid input."
    if field:
        return f"{field}: {msg}"
    return msg


def _strip_inputs(errors: list) -> list:
    # Pydantic echoes the rejected value; never send a password back.
    return [{k: v for k, v in err.items() if k not in ("input", "ctx", "url")} for err in errors]


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    logger.debug("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": _detail_from_validation(exc),
            "errors": jsonable_encoder(_strip_inputs(exc.errors())),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
