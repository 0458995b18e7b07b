"""
In-process user store, used for local runs and tests.
"""

from __future__ import annotations

import asyncio
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from store.base import NewUser, StoreError, UserRecord, UserStore


class InMemoryUserStore(UserStore):
    def __init__(self) -> None:
        self._users: Dict[str, UserRecord] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._users)

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        return self._users.get(email)

    async def insert_user(self, user: NewUser) -> UserRecord:
        async with self._lock:
            if user.email in self._users:
                raise StoreError(f"duplicate key value for email {user.email!r}")
            record = UserRecord(
                id=uuid.uuid4(),
                email=user.email,
                password_hash=user.password_hash,
                name=user.name,
                created_at=datetime.now(timezone.utc),
            )
            self._users[user.email] = record
            return record
