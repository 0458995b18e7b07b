"""
Tests for settings-driven wiring: backend choice and startup checks.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from config.settings import PLACEHOLDER_JWT_SECRET
from conftest import _settings
from main import check_settings, create_app
from store import InMemoryUserStore, SqlUserStore, SupabaseUserStore, build_user_store


class TestResolvedBackend:
    def test_auto_prefers_supabase_when_url_set(self):
        settings = _settings(store_backend="auto", supabase_url="https://p.supabase.co")
        assert settings.resolved_store_backend() == "supabase"

    def test_auto_falls_back_to_sql(self):
        settings = _settings(store_backend="auto", supabase_url=None)
        assert settings.resolved_store_backend() == "sql"

    def test_explicit_backend_wins(self):
        settings = _settings(store_backend="Memory", supabase_url="https://p.supabase.co")
        assert settings.resolved_store_backend() == "memory"

    def test_env_example_starts_on_sql(self):
        env_example = Path(__file__).resolve().parents[1] / ".env.example"
        settings = _settings(_env_file=env_example, store_backend="auto")
        assert not settings.supabase_url
        assert settings.resolved_store_backend() == "sql"


class TestBuildUserStore:
    @pytest.mark.asyncio
    async def test_memory(self):
        store = await build_user_store(_settings(store_backend="memory"))
        assert isinstance(store, InMemoryUserStore)

    @pytest.mark.asyncio
    async def test_supabase(self):
        store = await build_user_store(
            _settings(store_backend="supabase", supabase_url="https://p.supabase.co", supabase_anon_key="anon")
        )
        assert isinstance(store, SupabaseUserStore)
        await store.close()

    @pytest.mark.asyncio
    async def test_sql_creates_schema(self):
        store = await build_user_store(
            _settings(store_backend="sql", database_url="sqlite+aiosqlite:///:memory:")
        )
        assert isinstance(store, SqlUserStore)
        assert await store.find_user_by_email("a@x.com") is None
        await store.close()

    @pytest.mark.asyncio
    async def test_unknown_backend(self):
        with pytest.raises(RuntimeError):
            await build_user_store(_settings(store_backend="redis"))


class TestStartupChecks:
    def test_placeholder_secret_refused_in_production(self):
        with pytest.raises(RuntimeError, match="JWT_SECRET"):
            check_settings(_settings(environment="production", jwt_secret=PLACEHOLDER_JWT_SECRET))

    def test_placeholder_secret_allowed_in_development(self):
        check_settings(_settings(jwt_secret=PLACEHOLDER_JWT_SECRET))

    def test_app_startup_fails_in_production_with_placeholder(self):
        app = create_app(_settings(environment="production", jwt_secret=PLACEHOLDER_JWT_SECRET))
        with pytest.raises(RuntimeError):
            with TestClient(app):
                pass

    def test_app_builds_its_own_store(self):
        app = create_app(_settings(store_backend="memory"))
        with TestClient(app) as client:
            assert isinstance(app.state.user_store, InMemoryUserStore)
            assert client.get("/health").status_code == 200
