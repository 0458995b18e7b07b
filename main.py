"""
Authentication API — application entry point.
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from api.errors import register_exception_handlers
from api.health import router as health_router
from api.middleware import register_middleware
from auth.routes import router as auth_router
from auth.tokens import TokenIssuer
from config.settings import PLACEHOLDER_JWT_SECRET, Settings, config
from store import UserStore, build_user_store

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("httpcore", "httpx", "sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def check_settings(settings: Settings) -> None:
    """Refuse to run in production with the placeholder signing secret."""
    if settings.is_production and settings.jwt_secret == PLACEHOLDER_JWT_SECRET:
        raise RuntimeError("Missing env variable: JWT_SECRET")


def create_app(
    settings: Optional[Settings] = None,
    *,
    user_store: Optional[UserStore] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    ``user_store`` may be injected (tests, embedding); otherwise the
    backend named in settings is built at startup and closed at shutdown.
    """
    settings = settings or config

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        check_settings(settings)
        app.state.settings = settings
        app.state.token_issuer = TokenIssuer.from_settings(settings)
        owns_store = user_store is None
        if owns_store:
            app.state.user_store = await build_user_store(settings)
        else:
            app.state.user_store = user_store
        app.state.started_at = time.monotonic()
        logger.info("Application ready to accept requests.")

        yield

        if owns_store:
            await app.state.user_store.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description=settings.project_description,
        lifespan=lifespan,
    )

    register_middleware(app, settings)
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(health_router)

    return app


def main() -> None:
    configure_logging(config)
    try:
        check_settings(config)
    except RuntimeError:
        logger.exception("Server startup failed")
        sys.exit(1)

    logger.info("HTTP server on http://%s:%d (docs at /docs)", config.host, config.port)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level="debug" if config.debug else "info",
    )


if __name__ == "__main__":
    main()
