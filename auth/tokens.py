"""
Bearer token creation and verification (JWT).

Tokens are HS256-signed JWTs carrying the user id in ``sub`` plus
``iat``/``exp``.  The secret and lifetime come from settings
(env vars: ``JWT_SECRET``, ``JWT_EXPIRY_SECONDS``).
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import jwt

from auth.errors import InvalidToken
from config.settings import Settings


class TokenIssuer:
    """Signs and verifies bearer tokens bound to a user id."""

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        expiry_seconds: int = 604800,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.expiry_seconds = expiry_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expiry_seconds=settings.jwt_expiry_seconds,
        )

    def create_token(self, user_id: str | uuid.UUID) -> str:
        """Create a signed token containing ``user_id`` and expiry."""
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=self.expiry_seconds),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> dict:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidToken("Token expired.") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidToken() from exc

    def verify(self, token: str) -> str:
        """
        Verify token and return ``user_id``.

        Raises ``InvalidToken`` on a bad signature, malformed token or
        expiry.
        """
        return self.decode(token)["sub"]
