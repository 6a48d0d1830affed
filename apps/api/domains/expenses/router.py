"""Expenses router: read back stored expenses for the dashboard."""

from typing import List

import structlog
from fastapi import APIRouter, Depends, Query

from apps.api.core.errors import StorageError
from apps.api.deps import get_expense_store
from apps.api.domains.expenses.repository import ExpenseStore
from apps.api.domains.expenses.schemas import TransactionRecord

router = APIRouter(prefix="/expenses", tags=["expenses"])
logger = structlog.get_logger()


@router.get("", response_model=List[TransactionRecord])
def list_expenses(
    phone: str = Query(..., min_length=1),
    store: ExpenseStore = Depends(get_expense_store),
):
    """Return a user's expenses, newest first."""
    try:
        return store.list_for_user(phone)
    except Exception as e:
        logger.error("expenses_fetch_failed", error=str(e))
        raise StorageError("Failed to fetch expenses")
