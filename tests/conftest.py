"""
Shared fixtures: settings pinned to the in-memory store and a test client.
"""

import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from main import create_app
from store.memory import InMemoryUserStore

TEST_SECRET = "test-secret-key-with-enough-length"


def _settings(**overrides) -> Settings:
    defaults = dict(
        _env_file=None,
        store_backend="memory",
        jwt_secret=TEST_SECRET,
        environment="development",
    )
    defaults.update(overrides)
    return Settings(**defaults)


@pytest.fixture
def settings() -> Settings:
    return _settings()


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def client(settings, store):
    app = create_app(settings, user_store=store)
    with TestClient(app) as c:
        yield c
