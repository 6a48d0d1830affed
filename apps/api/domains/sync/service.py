"""Sync service: secret check, parse, and store one forwarded notification.

Only debit messages with a non-zero amount are stored. Messages without a
recognisable merchant are still stored under "Unknown"; the amount decides
whether a message is a transaction.
"""

import hmac

import structlog

from apps.api.core.config import Settings
from apps.api.core.errors import ForbiddenError, StorageError
from apps.api.domains.expenses.repository import ExpenseStore
from apps.api.domains.expenses.schemas import TransactionRecord
from apps.api.domains.sync.schemas import SyncRequest, SyncResponse, SyncStatus
from packages.notification_engine import IgnoreReason, NotificationParser, RawMessage

logger = structlog.get_logger()

_IGNORE_DETAILS = {
    IgnoreReason.CREDIT: "Ignored: Income transaction",
    IgnoreReason.NOT_A_TRANSACTION: "Ignored: Not a transaction",
}


def verify_secret(secret: str, settings: Settings) -> None:
    """Raise ForbiddenError unless ``secret`` matches API_SECRET."""
    if not settings.secret_required:
        return
    if not settings.API_SECRET or not hmac.compare_digest(
        secret.encode("utf-8"), settings.API_SECRET.encode("utf-8")
    ):
        raise ForbiddenError("Invalid secret")


def sync_message(
    request: SyncRequest,
    parser: NotificationParser,
    store: ExpenseStore,
    store_original: bool = True,
) -> SyncResponse:
    message = RawMessage(
        text=request.message,
        source_app=request.app_name,
        source_style=parser.style,
    )
    result = parser.parse(message)

    if result.ignore_reason is not None:
        logger.info(
            "sync_ignored",
            reason=result.ignore_reason.value,
            app_name=request.app_name,
        )
        return SyncResponse(
            status=SyncStatus.IGNORED,
            detail=_IGNORE_DETAILS[result.ignore_reason],
            reason=result.ignore_reason.value,
        )

    if not result.is_transaction:
        logger.info("sync_no_amount", app_name=request.app_name)
        return SyncResponse(status=SyncStatus.NO_AMOUNT, detail="No amount found")

    record = TransactionRecord(
        user_id=request.user_phone,
        amount=result.amount,
        merchant=result.merchant,
        category=result.category,
        source_app=request.app_name,
        original_message=request.message if store_original else None,
    )

    try:
        store.add(record)
    except Exception as e:
        logger.error("sync_store_failed", error=str(e), user_phone=request.user_phone)
        raise StorageError("Failed to store expense")

    logger.info(
        "sync_saved",
        amount=record.amount,
        merchant=record.merchant,
        category=record.category,
        has_merchant=result.has_merchant,
        user_phone=record.user_id,
    )
    return SyncResponse(status=SyncStatus.SAVED, detail="Saved", transaction=record)
