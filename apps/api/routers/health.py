"""Health and keep-alive routes.

``/ping`` and ``/`` sit outside the API prefix so uptime monitors can keep
free-tier hosts awake with a plain GET.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from apps.api.core.config import Settings
from apps.api.deps import get_app_settings

router = APIRouter(tags=["health"])
keepalive_router = APIRouter(tags=["health"])


@router.get("/health")
async def health_liveness(settings: Settings = Depends(get_app_settings)):
    """Liveness probe: returns 200 if the API process is running."""
    return {
        "status": "healthy",
        "service": "api",
        "version": settings.APP_VERSION,
        "source_style": settings.SOURCE_STYLE.value,
    }


@keepalive_router.get("/ping", response_class=PlainTextResponse)
async def ping():
    return "Pong"


@keepalive_router.get("/", response_class=PlainTextResponse)
async def root():
    return "Expense Tracker Backend is Live!"
