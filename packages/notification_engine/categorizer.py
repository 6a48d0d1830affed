from typing import Optional

from .constants import UNKNOWN_MERCHANT
from .profiles import SourceProfile


class KeywordCategorizer:
    """Maps a merchant name to a category using a profile's ordered rules.

    Keywords are matched as substrings of the lowercased merchant so that
    concatenated identifiers like "SWIGGY*ORDER123" still match. Rules are
    tried in order and the first hit wins.
    """

    def __init__(self, profile: SourceProfile):
        self.profile = profile

    def match(self, merchant: str) -> Optional[str]:
        """Return the matching label, or None when no rule applies."""
        if not merchant or merchant == UNKNOWN_MERCHANT:
            return None

        merchant_lower = merchant.lower()
        for rule in self.profile.category_rules:
            if any(keyword in merchant_lower for keyword in rule.keywords):
                return rule.label
        return None

    def categorize(self, merchant: str) -> str:
        return self.match(merchant) or self.profile.default_category
