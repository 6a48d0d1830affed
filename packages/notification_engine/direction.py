from dataclasses import dataclass
from typing import Optional

from .constants import Direction, IgnoreReason
from .profiles import SourceProfile


@dataclass(frozen=True)
class DirectionCheck:
    direction: Direction
    reason: Optional[IgnoreReason] = None


def check_direction(text: str, profile: SourceProfile) -> DirectionCheck:
    """Decide whether a normalized message is an outbound spend.

    Credit keywords are checked before debit keywords: a credit alert can
    still mention "sent" in an unrelated clause. Matching is by substring,
    so "debited" also catches "debited:" and similar punctuation.
    """
    if any(keyword in text for keyword in profile.credit_keywords):
        return DirectionCheck(Direction.IGNORE, IgnoreReason.CREDIT)

    if not any(keyword in text for keyword in profile.debit_keywords):
        return DirectionCheck(Direction.IGNORE, IgnoreReason.NOT_A_TRANSACTION)

    return DirectionCheck(Direction.DEBIT)
