"""Enumerations and sentinels shared across the notification engine.

Using str-backed enums instead of bare strings keeps the labels stable
when they are written to storage or returned over the API.
"""

from enum import Enum


UNKNOWN_MERCHANT = "Unknown"
NO_AMOUNT = 0.0
# SMS and push texts are far shorter; longer input is not parsed at all.
MAX_MESSAGE_LENGTH = 2000


class Category(str, Enum):
    """Spending categories assigned to a parsed notification."""

    FOOD = "Food"
    TRAVEL = "Travel"
    BILLS = "Bills"
    SHOPPING = "Shopping"
    BILLS_OR_SHOPPING = "Bills/Shopping"
    GENERAL = "General"


class SourceStyle(str, Enum):
    """Message vocabulary of a deployment (bank SMS or wallet push)."""

    BANK_SMS = "bank_sms"
    WALLET_NOTIFICATION = "wallet_notification"


class Direction(str, Enum):
    DEBIT = "debit"
    IGNORE = "ignore"


class IgnoreReason(str, Enum):
    CREDIT = "credit"
    NOT_A_TRANSACTION = "not_a_transaction"


class CasingPolicy(str, Enum):
    """How a sanitized merchant name is cased before it is stored."""

    PRESERVE = "preserve"
    UPPER = "upper"
    LOWER = "lower"
    TITLE = "title"

    def apply(self, value: str) -> str:
        if self is CasingPolicy.UPPER:
            return value.upper()
        if self is CasingPolicy.LOWER:
            return value.lower()
        if self is CasingPolicy.TITLE:
            return value.title()
        return value
