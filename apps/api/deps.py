"""FastAPI dependencies shared by the routers.

Parser and store are process-wide singletons: the parser is pure and the
store owns its own locking, so one instance serves every request.
"""
import threading
from functools import lru_cache
from typing import Optional

import structlog
from fastapi import Depends

from apps.api.core import config
from apps.api.core.config import Settings
from apps.api.domains.expenses.repository import (
    ExpenseStore,
    InMemoryExpenseStore,
    SupabaseExpenseStore,
)
from apps.api.supabase_client import get_supabase_client
from packages.notification_engine import NotificationParser, SourceStyle, get_profile, load_profile

logger = structlog.get_logger()

_store: Optional[ExpenseStore] = None
_store_lock = threading.Lock()


def get_app_settings() -> Settings:
    return config.settings


@lru_cache(maxsize=8)
def build_parser(style: SourceStyle, profile_path: str) -> NotificationParser:
    profile = load_profile(profile_path, style=style) if profile_path else get_profile(style)
    logger.info("parser_initialized", style=profile.style.value, profile_version=profile.version)
    return NotificationParser(profile)


def get_parser(settings: Settings = Depends(get_app_settings)) -> NotificationParser:
    return build_parser(settings.SOURCE_STYLE, settings.PROFILE_PATH)


def get_expense_store(settings: Settings = Depends(get_app_settings)) -> ExpenseStore:
    """Get or create the expense store singleton."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                if settings.supabase_enabled:
                    _store = SupabaseExpenseStore(
                        get_supabase_client(settings), table=settings.EXPENSES_TABLE
                    )
                    logger.info("expense_store_initialized", backend="supabase")
                else:
                    _store = InMemoryExpenseStore()
                    logger.info("expense_store_initialized", backend="memory")
    return _store
