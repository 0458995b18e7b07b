"""
store — user persistence behind a narrow async interface.

Backends:
  • ``InMemoryUserStore``  — dict in process memory
  • ``SqlUserStore``       — async SQLAlchemy (PostgreSQL, SQLite, …)
  • ``SupabaseUserStore``  — hosted PostgREST over httpx

``build_user_store`` picks one from settings.
"""

from __future__ import annotations

import logging

from config.settings import Settings
from store.base import NewUser, StoreError, UserRecord, UserStore
from store.memory import InMemoryUserStore
from store.sql import SqlUserStore
from store.supabase import SupabaseUserStore

logger = logging.getLogger(__name__)


async def build_user_store(settings: Settings) -> UserStore:
    """Construct the configured backend, creating the SQL schema if needed."""
    backend = settings.resolved_store_backend()

    if backend == "supabase":
        if not settings.supabase_url:
            raise RuntimeError("Missing env variable: SUPABASE_URL")
        logger.info("User store: Supabase (%s)", settings.supabase_url)
        return SupabaseUserStore(
            settings.supabase_url,
            settings.supabase_anon_key,
            table=settings.users_table,
        )

    if backend == "sql":
        logger.info("User store: SQL database")
        store = SqlUserStore.from_url(settings.database_url, echo=settings.debug)
        await store.create_schema()
        return store

    if backend == "memory":
        logger.warning("User store: in-memory, users are lost on restart")
        return InMemoryUserStore()

    raise RuntimeError(f"Unknown store backend: {settings.store_backend!r}")


__all__ = [
    "InMemoryUserStore",
    "NewUser",
    "SqlUserStore",
    "StoreError",
    "SupabaseUserStore",
    "UserRecord",
    "UserStore",
    "build_user_store",
]
