import math
import re

from .constants import NO_AMOUNT


# Alphabetic markers must start a word so "hrs 5" or "cinr" never count.
# A trailing "." after "rs" is part of the marker, not the number.
AMOUNT_PATTERN = re.compile(
    r"(?:(?<![a-z])(?:rs\.?|inr)|₹)\s*(\d+(?:\.\d*)?|\.\d+)",
    re.IGNORECASE,
)


def extract_amount(text: str) -> float:
    """Return the first currency-marked figure in ``text``, or 0.

    Only the first match is used. When a balance is quoted before the
    transaction amount ("Avl Bal Rs 500, Rs 200 debited") the balance is
    returned; no attempt is made to tell the two apart.
    """
    match = AMOUNT_PATTERN.search(text)
    if not match:
        return NO_AMOUNT

    amount = float(match.group(1))
    if not math.isfinite(amount):
        return NO_AMOUNT
    return amount
