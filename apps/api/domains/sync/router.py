"""Sync router: entry point for notifications forwarded by the phone agent.

Handlers are plain ``def`` so parsing and store calls run in the threadpool
instead of on the event loop.
"""

from fastapi import APIRouter, Depends

from apps.api.core.config import Settings
from apps.api.deps import build_parser, get_app_settings, get_expense_store, get_parser
from apps.api.domains.expenses.repository import ExpenseStore
from apps.api.domains.sync.schemas import (
    ParseRequest,
    ParseResponse,
    SyncRequest,
    SyncResponse,
)
from apps.api.domains.sync.service import sync_message, verify_secret
from packages.notification_engine import NotificationParser, RawMessage

router = APIRouter(tags=["sync"])


@router.post("/sync", response_model=SyncResponse)
def sync_notification(
    request: SyncRequest,
    settings: Settings = Depends(get_app_settings),
    parser: NotificationParser = Depends(get_parser),
    store: ExpenseStore = Depends(get_expense_store),
):
    """Parse one forwarded SMS / push notification and store it if it is a spend."""
    verify_secret(request.secret, settings)
    return sync_message(
        request,
        parser=parser,
        store=store,
        store_original=settings.STORE_ORIGINAL_MESSAGE,
    )


@router.post("/parse", response_model=ParseResponse)
def parse_only(
    request: ParseRequest,
    settings: Settings = Depends(get_app_settings),
    parser: NotificationParser = Depends(get_parser),
):
    """Show what the parser extracts from a message, without storing it.

    ``source_style`` selects a built-in profile; when omitted the
    deployment's configured profile is used.
    """
    verify_secret(request.secret, settings)
    if request.source_style is not None and request.source_style is not parser.style:
        parser = build_parser(request.source_style, "")

    result = parser.parse(
        RawMessage(text=request.text, source_app=request.source_app, source_style=parser.style)
    )
    return ParseResponse(source_style=parser.style, **result.to_dict())
