"""Pydantic schemas for the expenses domain.

Field aliases keep the stored document shape used by the phone agent and
the dashboard (``userPhone``, ``appName``, ``originalMessage``, ``date``).
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransactionRecord(BaseModel):
    """One stored expense."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userPhone")
    amount: float = Field(..., gt=0)
    merchant: str
    category: str
    source_app: str = Field(default="", alias="appName")
    original_message: Optional[str] = Field(default=None, alias="originalMessage")
    timestamp: datetime = Field(default_factory=_utcnow, alias="date")

    def to_document(self) -> dict:
        """Storage representation (aliased keys, ISO timestamp)."""
        return self.model_dump(mode="json", by_alias=True)
