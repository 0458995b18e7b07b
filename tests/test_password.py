"""
Tests for bcrypt hashing and verification.
"""

import bcrypt
import pytest

from auth.password import (
    BCRYPT_ROUNDS,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)


class TestHashPassword:
    def test_roundtrip_matches(self):
        hashed = hash_password("secret1")
        assert verify_password("secret1", hashed)

    def test_different_password_never_matches(self):
        hashed = hash_password("secret1")
        for other in ("secret2", "Secret1", "secret1 ", "", "wrong12"):
            assert not verify_password(other, hashed)

    def test_hash_is_salted(self):
        assert hash_password("secret1") != hash_password("secret1")

    def test_hash_hides_plaintext(self):
        assert "secret1" not in hash_password("secret1")

    def test_uses_fixed_cost_factor(self):
        hashed = hash_password("secret1")
        assert hashed.startswith(f"$2b${BCRYPT_ROUNDS:02d}$")

    def test_accepts_hash_from_other_cost_factor(self):
        hashed = bcrypt.hashpw(b"secret1", bcrypt.gensalt(rounds=4)).decode()
        assert verify_password("secret1", hashed)

    def test_garbage_hash_is_a_mismatch(self):
        assert verify_password("secret1", "not-a-bcrypt-hash") is False

    def test_long_password_roundtrip(self):
        password = "x" * 100
        assert verify_password(password, hash_password(password))


class TestAsyncWrappers:
    @pytest.mark.asyncio
    async def test_async_roundtrip(self):
        hashed = await hash_password_async("secret1")
        assert await verify_password_async("secret1", hashed)
        assert not await verify_password_async("wrong12", hashed)
