"""
Auth failures raised by the service layer.

Each error carries the HTTP status it maps to; ``api.errors`` renders
them as ``{"message": ...}`` bodies.
"""

from __future__ import annotations

from fastapi import status


class AuthError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Authentication error."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentials(AuthError):
    # Covers both unknown email and wrong password.
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password."


class DuplicateUser(AuthError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User with this email already exists."


class CreationFailed(AuthError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Failed to create user."


class InvalidToken(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token."
