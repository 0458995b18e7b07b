"""
AuthService — the login and registration flows.

The service is constructed with an explicit ``UserStore`` and
``TokenIssuer``; it never reaches for module-level clients.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from auth.errors import CreationFailed, DuplicateUser, InvalidCredentials
from auth.password import hash_password, hash_password_async, verify_password_async
from auth.tokens import TokenIssuer
from store.base import NewUser, StoreError, UserStore

logger = logging.getLogger(__name__)

# Unknown emails are checked against this hash; both rejection paths run bcrypt.
_DUMMY_PASSWORD_HASH = hash_password("dummy-password-never-matches")


@dataclass(frozen=True)
class LoginResult:
    user_id: uuid.UUID
    token: str
    message: str = "Login successful"


class AuthService:
    def __init__(self, store: UserStore, tokens: TokenIssuer):
        self.store = store
        self.tokens = tokens

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Check ``email``/``password`` and issue a token for the user.

        Unknown emails and wrong passwords both raise ``InvalidCredentials``
        so callers cannot probe which addresses are registered.
        """
        try:
            user = await self.store.find_user_by_email(email)
        except StoreError:
            logger.exception("User lookup failed during login")
            raise InvalidCredentials()

        if user is None:
            await verify_password_async(password, _DUMMY_PASSWORD_HASH)
            logger.info("Login rejected: unknown email")
            raise InvalidCredentials()

        if not await verify_password_async(password, user.password_hash):
            logger.info("Login rejected: bad password for %s", user.id)
            raise InvalidCredentials()

        token = self.tokens.create_token(user.id)
        logger.info("Login: %s", user.id)
        return LoginResult(user_id=user.id, token=token)

    async def register(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
    ) -> uuid.UUID:
        """Create a user and return the id the store assigned."""
        try:
            existing = await self.store.find_user_by_email(email)
        except StoreError:
            logger.exception("User lookup failed during registration")
            raise CreationFailed()

        if existing is not None:
            raise DuplicateUser()

        password_hash = await hash_password_async(password)

        try:
            user = await self.store.insert_user(
                NewUser(email=email, password_hash=password_hash, name=name)
            )
        except StoreError as exc:
            logger.error("User insert failed: %s", exc)
            raise CreationFailed()

        logger.info("Registered user %s", user.id)
        return user.id
