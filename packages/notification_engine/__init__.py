"""
Notification Engine

Extracts amount, merchant, category and direction from bank SMS and
wallet push notifications.
"""

__version__ = "0.1.0"

from .constants import (
    CasingPolicy,
    Category,
    Direction,
    IgnoreReason,
    MAX_MESSAGE_LENGTH,
    SourceStyle,
    UNKNOWN_MERCHANT,
)
from .models import ExtractionResult, RawMessage
from .pipeline import NotificationParser, parse_notification
from .profiles import (
    BANK_SMS_PROFILE,
    WALLET_NOTIFICATION_PROFILE,
    CategoryRule,
    ProfileError,
    SourceProfile,
    get_profile,
    load_profile,
)

__all__ = [
    "CasingPolicy",
    "Category",
    "Direction",
    "IgnoreReason",
    "MAX_MESSAGE_LENGTH",
    "SourceStyle",
    "UNKNOWN_MERCHANT",
    "ExtractionResult",
    "RawMessage",
    "NotificationParser",
    "parse_notification",
    "BANK_SMS_PROFILE",
    "WALLET_NOTIFICATION_PROFILE",
    "CategoryRule",
    "ProfileError",
    "SourceProfile",
    "get_profile",
    "load_profile",
]
