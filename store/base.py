"""
UserStore — abstract interface for user persistence.

The auth service only needs two things from a store: look up a user by
email and insert a new user.  Every backend (in-memory, SQL, hosted
PostgREST) subclasses this and implements both.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


class StoreError(Exception):
    """Raised by a backend when the underlying data service fails."""


@dataclass(frozen=True)
class UserRecord:
    id: uuid.UUID
    email: str
    password_hash: str = field(repr=False)
    name: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewUser:
    email: str
    password_hash: str = field(repr=False)
    name: Optional[str] = None


class UserStore(ABC):
    """Abstract base for all user store backends."""

    @abstractmethod
    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Return the single user registered under ``email``, or ``None``.

        Raises ``StoreError`` if the backend cannot answer.
        """
        ...

    @abstractmethod
    async def insert_user(self, user: NewUser) -> UserRecord:
        """
        Insert a new user row and return it with its assigned id.

        Raises ``StoreError`` if the row could not be created, including
        when the email is already taken.
        """
        ...

    async def close(self) -> None:
        """Release connections held by the backend (optional)."""
        return None
