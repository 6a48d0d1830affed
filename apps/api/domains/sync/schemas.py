"""Pydantic schemas for the sync domain."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from apps.api.domains.expenses.schemas import TransactionRecord
from packages.notification_engine import MAX_MESSAGE_LENGTH, SourceStyle


class SyncRequest(BaseModel):
    """A notification forwarded by the phone agent."""

    user_phone: str = Field(..., min_length=1)
    message: str = Field(..., max_length=MAX_MESSAGE_LENGTH)
    app_name: str = ""
    secret: str = ""


class SyncStatus(str, Enum):
    SAVED = "saved"
    IGNORED = "ignored"
    NO_AMOUNT = "no_amount"


class SyncResponse(BaseModel):
    status: SyncStatus
    detail: str
    reason: Optional[str] = None
    transaction: Optional[TransactionRecord] = None


class ParseRequest(BaseModel):
    """Run the parser without storing anything."""

    text: str = Field(..., max_length=MAX_MESSAGE_LENGTH)
    source_app: str = ""
    source_style: Optional[SourceStyle] = None
    secret: str = ""


class ParseResponse(BaseModel):
    source_style: SourceStyle
    direction: str
    amount: float
    merchant: str
    category: str
    ignore_reason: Optional[str] = None
