"""
Notification Parser - turns one forwarded payment notification into an
ExtractionResult.

Steps: normalize -> direction gate -> amount -> merchant -> sanitize ->
categorize. Every step is a pure function of the message and the profile,
so a single parser instance can be shared across threads and requests.
"""

import logging
from typing import Optional, Union

from .amount import extract_amount
from .categorizer import KeywordCategorizer
from .constants import Direction, IgnoreReason, MAX_MESSAGE_LENGTH, SourceStyle
from .direction import check_direction
from .merchant import extract_merchant, sanitize_merchant
from .models import ExtractionResult, RawMessage
from .normalizer import normalize
from .profiles import SourceProfile, get_profile

logger = logging.getLogger(__name__)


class NotificationParser:
    """Parses notifications of one source style.

    The profile is fixed at construction. Messages whose ``source_style``
    differs from the parser's are still parsed with the parser's profile;
    use ``parse_notification`` to pick the profile per message.
    """

    def __init__(self, profile: Optional[SourceProfile] = None):
        self.profile = profile or get_profile(SourceStyle.BANK_SMS)
        self.categorizer = KeywordCategorizer(self.profile)

    @property
    def style(self) -> SourceStyle:
        return self.profile.style

    def parse(self, message: RawMessage) -> ExtractionResult:
        if message.text and len(message.text) > MAX_MESSAGE_LENGTH:
            logger.warning(
                f"[NotificationParser] Skipped {len(message.text)}-character message "
                f"from '{message.source_app}' (limit {MAX_MESSAGE_LENGTH})"
            )
            return ExtractionResult(
                direction=Direction.IGNORE, ignore_reason=IgnoreReason.NOT_A_TRANSACTION
            )

        normalized = normalize(message.text)

        check = check_direction(normalized.text, self.profile)
        if check.direction is Direction.IGNORE:
            logger.debug(
                f"[NotificationParser] Ignored message from '{message.source_app}'. "
                f"Reason: {check.reason.value}"
            )
            return ExtractionResult(direction=Direction.IGNORE, ignore_reason=check.reason)

        amount = extract_amount(normalized.text)
        if amount == 0:
            logger.debug(f"[NotificationParser] No amount found in message from '{message.source_app}'")

        merchant = sanitize_merchant(
            extract_merchant(normalized.display, self.profile),
            self.profile,
        )
        category = self.categorizer.categorize(merchant)

        return ExtractionResult(
            amount=amount,
            merchant=merchant,
            direction=Direction.DEBIT,
            category=category,
        )

    def parse_text(self, text: str, source_app: str = "") -> ExtractionResult:
        return self.parse(RawMessage(text=text, source_app=source_app, source_style=self.style))


def parse_notification(
    text: str,
    source_app: str = "",
    style: Union[SourceStyle, str] = SourceStyle.BANK_SMS,
) -> ExtractionResult:
    """Parse ``text`` with the built-in profile for ``style``."""
    profile = get_profile(style)
    return NotificationParser(profile).parse(
        RawMessage(text=text, source_app=source_app, source_style=profile.style)
    )
