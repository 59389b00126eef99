"""Account Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": message}
    - CORS headers configured from settings and present on every response
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - redirect_slashes=False: routes match exactly, "/api/health/" is not "/api/health"
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from account_service.api.cors import CORSBoundaryMiddleware
from account_service.api.error_handlers import register_error_handlers
from account_service.api.routes import accounts, health
from account_service.config import get_settings
from account_service.infrastructure.database import close_db, init_db
from account_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Account Service API started")
    yield
    await close_db()
    logger.info("Account Service API shutting down")


app = FastAPI(
    title="Account Service API", version="1.0.0",
    lifespan=lifespan, redirect_slashes=False,
)

settings = get_settings()
app.add_middleware(CORSBoundaryMiddleware, headers=settings.cors_headers())

# Routes: explicit registration
app.include_router(health.router)
app.include_router(accounts.router)

register_error_handlers(app)
