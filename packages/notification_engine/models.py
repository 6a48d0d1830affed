"""Input and output records of the notification engine."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .constants import (
    Category,
    Direction,
    IgnoreReason,
    NO_AMOUNT,
    SourceStyle,
    UNKNOWN_MERCHANT,
)


@dataclass(frozen=True)
class RawMessage:
    """A forwarded notification exactly as the phone agent sent it."""

    text: str
    source_app: str = ""
    source_style: SourceStyle = SourceStyle.BANK_SMS


@dataclass(frozen=True)
class ExtractionResult:
    """Structured fields pulled out of one notification.

    ``amount == 0`` means no currency-marked figure was found and the
    message must not be stored. ``merchant == "Unknown"`` is a valid
    placeholder, the record can still be stored.
    """

    amount: float = NO_AMOUNT
    merchant: str = UNKNOWN_MERCHANT
    direction: Direction = Direction.IGNORE
    category: str = Category.GENERAL.value
    ignore_reason: Optional[IgnoreReason] = None

    @property
    def is_transaction(self) -> bool:
        """True when the caller should persist this result."""
        return self.direction is Direction.DEBIT and self.amount > 0

    @property
    def has_merchant(self) -> bool:
        return self.merchant != UNKNOWN_MERCHANT

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["direction"] = self.direction.value
        data["ignore_reason"] = self.ignore_reason.value if self.ignore_reason else None
        return data
