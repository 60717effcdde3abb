"""
Application entry point.

Creates the FastAPI application and wires together:
- Storage client (one per process, shared through app.state)
- Routers (one per catalog resource)
- Error handlers (gate errors to HTTP)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from backlog.core.config import Settings, settings as default_settings
from backlog.infrastructure.catalog.database import Database
from backlog.interfaces.catalog.community import comment_router, review_router
from backlog.interfaces.catalog.playlists import router as playlist_router
from backlog.interfaces.catalog.router import routers as catalog_routers
from backlog.interfaces.health import router as health_router
from backlog.shared.errors.handlers import register_error_handlers
from backlog.shared.logging import configure_logging
from backlog.shared.security.headers import SecurityHeadersMiddleware
from backlog.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the store, release it on shutdown."""
    database: Database = app.state.database
    if app.state.settings.create_tables_on_startup:
        database.create_all()
    logger.info("%s %s started", app.state.settings.project_name, app.state.settings.version)

    yield

    database.dispose()


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to build with. Defaults to the environment.
        database: Storage client to share. Built from settings when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, echo_sql=settings.database_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)

    # --- Rate Limiting ---
    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    for router in (*catalog_routers, playlist_router, review_router, comment_router):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()
