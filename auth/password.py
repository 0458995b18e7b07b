"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic salting.  The work
factor is fixed at 8 rounds so hashes stay interchangeable with the
existing user table.
"""

from __future__ import annotations

import asyncio

import bcrypt

BCRYPT_ROUNDS = 8
# bcrypt only looks at the first 72 bytes of the secret.
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode()[:_MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (auto-salted, work factor 8)."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (ValueError, TypeError):
        return False


async def hash_password_async(password: str) -> str:
    """Run :func:`hash_password` in a worker thread."""
    return await asyncio.to_thread(hash_password, password)


async def verify_password_async(password: str, password_hash: str) -> bool:
    """Run :func:`verify_password` in a worker thread."""
    return await asyncio.to_thread(verify_password, password, password_hash)
