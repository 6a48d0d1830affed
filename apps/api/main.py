"""Expense sync API: FastAPI entry point.

Receives payment notifications forwarded from the phone, turns them into
expenses with the notification engine, and serves them back to the
dashboard.
"""

import structlog
from contextlib import asynccontextmanager
from fastapi import FastAPI

from apps.api.core.config import settings
from apps.api.core.errors import register_error_handlers
from apps.api.core.logging import setup_logging

from apps.api.domains.sync.router import router as sync_router
from apps.api.domains.expenses.router import router as expenses_router
from apps.api.routers import health

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown hooks."""
    setup_logging(
        log_level=settings.log_level,
        json_output=settings.is_production,
    )
    logger.info(
        "app_starting",
        version=settings.APP_VERSION,
        source_style=settings.SOURCE_STYLE.value,
        storage="supabase" if settings.supabase_enabled else "memory",
    )
    if not settings.API_SECRET:
        logger.warning("api_secret_unset", environment=settings.ENVIRONMENT)
    yield
    logger.info("app_stopping")


app = FastAPI(
    title="Expense Sync API",
    description="Turns forwarded bank SMS and wallet notifications into expenses.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(sync_router, prefix="/api/v1")
app.include_router(expenses_router, prefix="/api/v1")
app.include_router(health.router, prefix="/api/v1")
app.include_router(health.keepalive_router)
