"""
Tests for JWT issuance and verification.
"""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from auth.errors import InvalidToken
from auth.tokens import TokenIssuer

SECRET = "unit-test-secret-of-sufficient-length"


def _issuer(**overrides) -> TokenIssuer:
    return TokenIssuer(overrides.pop("secret", SECRET), **overrides)


class TestCreateToken:
    def test_payload_carries_user_id(self):
        user_id = uuid.uuid4()
        token = _issuer().create_token(user_id)
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["sub"] == str(user_id)

    def test_expiry_defaults_to_seven_days(self):
        token = _issuer().create_token("abc")
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenIssuer("")


class TestVerifyToken:
    def test_verify_returns_user_id(self):
        issuer = _issuer()
        assert issuer.verify(issuer.create_token("user-1")) == "user-1"

    def test_wrong_secret_rejected(self):
        token = _issuer(secret="another-secret-of-sufficient-length").create_token("user-1")
        with pytest.raises(InvalidToken):
            _issuer().verify(token)

    def test_expired_token_rejected(self):
        past = datetime.now(tz=timezone.utc) - timedelta(days=8)
        token = jwt.encode(
            {"sub": "user-1", "iat": past, "exp": past + timedelta(days=7)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken, match="expired"):
            _issuer().verify(token)

    def test_token_without_subject_rejected(self):
        token = jwt.encode(
            {"exp": datetime.now(tz=timezone.utc) + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidToken):
            _issuer().verify(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidToken):
            _issuer().verify("not.a.token")
