"""
User store on a relational database through async SQLAlchemy.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from database.models import User
from database.session import build_engine, build_session_factory, create_schema
from store.base import NewUser, StoreError, UserRecord, UserStore

logger = logging.getLogger(__name__)


def _to_record(row: User) -> UserRecord:
    return UserRecord(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        name=row.name,
        created_at=row.created_at,
    )


class SqlUserStore(UserStore):
    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_factory = build_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str, *, echo: bool = False) -> "SqlUserStore":
        return cls(build_engine(database_url, echo=echo))

    async def create_schema(self) -> None:
        await create_schema(self._engine)

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(User).where(User.email == email)
                )
                row = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StoreError(f"user lookup failed ({type(exc).__name__})") from exc
        return _to_record(row) if row is not None else None

    async def insert_user(self, user: NewUser) -> UserRecord:
        row = User(
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
        )
        try:
            async with self._session_factory() as session:
                session.add(row)
                await session.commit()
        except SQLAlchemyError as exc:
            raise StoreError(f"user insert failed ({type(exc).__name__})") from exc
        return _to_record(row)

    async def close(self) -> None:
        await self._engine.dispose()
