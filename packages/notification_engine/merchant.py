"""Merchant extraction and clean-up.

The merchant is the shortest run of name-like characters that follows one
of the profile's prefixes ("to", "at", "paid to", ...) and stops right
before one of its terminator words ("on", "via", "ref", ...) or at the
end of the message. Stopping at the first terminator is what drops
trailing reference numbers and balances.

The scan is split into three patterns (prefix, run of merchant characters,
terminator) so each character is examined a bounded number of times; a
single lazy pattern with a terminator lookahead goes quadratic on long
whitespace runs or repeated prefixes.
"""

import re
from functools import lru_cache
from typing import NamedTuple, Pattern, Tuple

from .constants import UNKNOWN_MERCHANT
from .profiles import SourceProfile


# "@" and "_" let UPI handles through so the sanitizer can cut the suffix.
MERCHANT_CHARS = r"[a-z0-9\s&\-.@_]"
MERCHANT_RUN = re.compile(MERCHANT_CHARS + "*", re.IGNORECASE)


class MerchantPatterns(NamedTuple):
    prefix: Pattern
    terminator: Pattern


def _phrase(words: str) -> str:
    # "spent on" must also match "spent  on"
    return r"\s+".join(re.escape(w) for w in words.split())


@lru_cache(maxsize=32)
def merchant_patterns(prefixes: Tuple[str, ...], terminators: Tuple[str, ...]) -> MerchantPatterns:
    prefix = "|".join(_phrase(p) for p in prefixes)
    terminator = "|".join(_phrase(t) for t in terminators)
    return MerchantPatterns(
        prefix=re.compile(rf"\b(?:{prefix})\b\s+", re.IGNORECASE),
        # Anchored to the start of a whitespace run so the run is only
        # walked once, not once per position inside it.
        terminator=re.compile(rf"(?<!\s)\s+(?:{terminator})\b", re.IGNORECASE),
    )


@lru_cache(maxsize=32)
def rail_token_pattern(tokens: Tuple[str, ...]) -> Pattern:
    return re.compile(
        r"\b(?:" + "|".join(re.escape(t) for t in tokens) + r")\b",
        re.IGNORECASE,
    )


def extract_merchant(text: str, profile: SourceProfile) -> str:
    """Return the raw merchant span of ``text``, or "Unknown".

    The first (leftmost) match wins. Matching ignores case, so passing
    case-preserved text returns the merchant as the sender wrote it.
    """
    if not text:
        return UNKNOWN_MERCHANT

    patterns = merchant_patterns(profile.merchant_prefixes, profile.merchant_terminators)
    pos = 0
    while True:
        prefix = patterns.prefix.search(text, pos)
        if prefix is None:
            return UNKNOWN_MERCHANT

        start = prefix.end()
        run_end = MERCHANT_RUN.match(text, start).end()
        # endpos keeps the character after the run visible to the trailing \b
        stop = patterns.terminator.search(text, start, run_end + 1)
        if stop is not None:
            end = stop.start()
        elif run_end == len(text) and run_end > start:
            end = run_end
        else:
            # Any later prefix inside this run hits the same dead end.
            pos = run_end
            continue

        merchant = text[start:end].strip()
        return merchant or UNKNOWN_MERCHANT


def sanitize_merchant(merchant: str, profile: SourceProfile) -> str:
    """Strip payment-rail noise from an extracted merchant and apply casing.

    "user@ybl" -> "user", "UPI Swiggy" -> "Swiggy". The "Unknown"
    placeholder passes through untouched.
    """
    if not merchant or merchant == UNKNOWN_MERCHANT:
        return UNKNOWN_MERCHANT

    cleaned = merchant
    if profile.rail_tokens:
        cleaned = rail_token_pattern(profile.rail_tokens).sub(" ", cleaned)
        cleaned = re.sub(r"\s+", " ", cleaned)

    if "@" in cleaned:
        cleaned = cleaned.split("@", 1)[0]

    cleaned = cleaned.strip()
    if not cleaned:
        return UNKNOWN_MERCHANT

    return profile.casing.apply(cleaned)
