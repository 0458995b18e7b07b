"""
User store on a hosted Supabase project.

Talks to the project's PostgREST endpoint (``/rest/v1``) over httpx,
authenticating with the anon/service key in both the ``apikey`` and
``Authorization`` headers.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from store.base import NewUser, StoreError, UserRecord, UserStore

logger = logging.getLogger(__name__)

_COLUMNS = "id,name,email,password_hash,created_at"

_timestamp = TypeAdapter(datetime)


def _to_record(row: Dict[str, Any]) -> UserRecord:
    created_at = row.get("created_at")
    return UserRecord(
        id=uuid.UUID(str(row["id"])),
        email=row["email"],
        password_hash=row["password_hash"],
        name=row.get("name"),
        created_at=_timestamp.validate_python(created_at) if created_at else None,
    )


def _rows(resp: httpx.Response) -> List[UserRecord]:
    """Decode a PostgREST row list; malformed bodies raise ``StoreError``."""
    try:
        return [_to_record(row) for row in resp.json()]
    except (KeyError, TypeError, ValueError, ValidationError) as exc:
        raise StoreError(f"malformed user row from data service ({type(exc).__name__})") from exc


class SupabaseUserStore(UserStore):
    """PostgREST-backed user table."""

    def __init__(
        self,
        url: str,
        key: str,
        *,
        table: str = "users",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ):
        if not url or not key:
            raise ValueError("Supabase URL and key are both required")
        self._table = table
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=f"{url.rstrip('/')}/rest/v1",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Accept": "application/json",
            },
            timeout=timeout,
        )

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        try:
            resp = await self._client.get(
                f"/{self._table}",
                params={"select": _COLUMNS, "email": f"eq.{email}", "limit": "2"},
            )
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise StoreError(f"user lookup failed: {exc}") from exc

        rows = _rows(resp)
        if not rows:
            return None
        if len(rows) > 1:
            raise StoreError(f"multiple users share email {email!r}")
        return rows[0]

    async def insert_user(self, user: NewUser) -> UserRecord:
        try:
            resp = await self._client.post(
                f"/{self._table}",
                params={"select": _COLUMNS},
                json={
                    "name": user.name,
                    "email": user.email,
                    "password_hash": user.password_hash,
                },
                headers={"Prefer": "return=representation"},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise StoreError(
                f"user insert rejected ({exc.response.status_code}): {exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"user insert failed: {exc}") from exc

        rows = _rows(resp)
        if not rows:
            raise StoreError("user insert returned no row")
        return rows[0]

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
