"""Source profiles: the keyword tables that drive the engine.

Each deployment variant (bank SMS, wallet push notification) runs the same
extraction code with a different ``SourceProfile``. Profiles are plain data,
versioned, and can be loaded from JSON so keywords and categories can be
extended without touching the extractors.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import CasingPolicy, Category, SourceStyle


class ProfileError(ValueError):
    """A profile file is missing or does not describe a valid profile."""


def _clean_keywords(values: Tuple[str, ...]) -> Tuple[str, ...]:
    cleaned = tuple(v.strip().lower() for v in values if v and v.strip())
    if len(cleaned) != len(values):
        raise ValueError("keywords must be non-empty strings")
    return cleaned


class CategoryRule(BaseModel):
    """One ordered category bucket: label plus the keywords that select it."""

    model_config = ConfigDict(frozen=True)

    label: str
    keywords: Tuple[str, ...]

    @field_validator("keywords")
    @classmethod
    def _lowercase_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("a category rule needs at least one keyword")
        return _clean_keywords(value)


class SourceProfile(BaseModel):
    """Keyword policy for one message style.

    Attributes:
        style: Which message vocabulary this profile describes.
        version: Free-form tag bumped whenever the tables change.
        credit_keywords: Any hit means money came in; checked first.
        debit_keywords: At least one must be present for an outbound spend.
        merchant_prefixes: Words or phrases that introduce the merchant.
        merchant_terminators: Words that end the merchant span.
        rail_tokens: Payment-rail words stripped from the merchant.
        casing: Casing applied to the sanitized merchant.
        category_rules: Ordered buckets; the first keyword hit wins.
        default_category: Label used when no bucket matches.
    """

    model_config = ConfigDict(frozen=True)

    style: SourceStyle
    version: str = "1"
    credit_keywords: Tuple[str, ...] = ()
    debit_keywords: Tuple[str, ...]
    merchant_prefixes: Tuple[str, ...]
    merchant_terminators: Tuple[str, ...]
    rail_tokens: Tuple[str, ...] = ("upi", "pos", "imps")
    casing: CasingPolicy = CasingPolicy.PRESERVE
    category_rules: Tuple[CategoryRule, ...] = ()
    default_category: str = Category.GENERAL.value

    @field_validator("credit_keywords", "rail_tokens")
    @classmethod
    def _lowercase_optional(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return _clean_keywords(value)

    @field_validator("debit_keywords", "merchant_prefixes", "merchant_terminators")
    @classmethod
    def _lowercase_required(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("must contain at least one keyword")
        return _clean_keywords(value)

    @property
    def labels(self) -> Tuple[str, ...]:
        """Every category this profile can emit, in rule order."""
        return tuple(rule.label for rule in self.category_rules) + (self.default_category,)


BANK_SMS_PROFILE = SourceProfile(
    style=SourceStyle.BANK_SMS,
    version="1",
    credit_keywords=("credited", "received", "paid you"),
    debit_keywords=("debited", "spent", "paid", "sent"),
    merchant_prefixes=("to", "at", "in", "spent on"),
    merchant_terminators=("on", "via", "using", "ref", "bal", "txn", "avl", "from"),
    casing=CasingPolicy.UPPER,
    category_rules=(
        CategoryRule(
            label=Category.FOOD.value,
            keywords=("swiggy", "zomato", "pizza", "burger", "tea", "coffee", "kfc", "mcdonalds"),
        ),
        CategoryRule(
            label=Category.TRAVEL.value,
            keywords=("uber", "ola", "rapido", "petrol", "shell", "hpcl", "bpcl", "pump", "fuel"),
        ),
        CategoryRule(
            label=Category.BILLS.value,
            keywords=("jio", "airtel", "vi", "bescom", "netflix", "hotstar", "spotify", "act"),
        ),
        CategoryRule(
            label=Category.SHOPPING.value,
            keywords=("amazon", "flipkart", "myntra", "zudio", "trends", "rel"),
        ),
    ),
)

WALLET_NOTIFICATION_PROFILE = SourceProfile(
    style=SourceStyle.WALLET_NOTIFICATION,
    version="1",
    debit_keywords=("paid", "sent"),
    merchant_prefixes=("paid to", "sent to"),
    merchant_terminators=("via", "using", "on", "successful"),
    casing=CasingPolicy.PRESERVE,
    category_rules=(
        CategoryRule(
            label=Category.FOOD.value,
            keywords=("swiggy", "zomato", "pizza", "burger", "tea", "coffee"),
        ),
        CategoryRule(
            label=Category.TRAVEL.value,
            keywords=("uber", "ola", "rapido", "petrol", "shell", "hpcl", "bpcl", "pump"),
        ),
        CategoryRule(
            label=Category.BILLS_OR_SHOPPING.value,
            keywords=("jio", "airtel", "bescom", "netflix", "amazon", "flipkart"),
        ),
    ),
)

BUILTIN_PROFILES: Dict[SourceStyle, SourceProfile] = {
    SourceStyle.BANK_SMS: BANK_SMS_PROFILE,
    SourceStyle.WALLET_NOTIFICATION: WALLET_NOTIFICATION_PROFILE,
}


def get_profile(style: Union[SourceStyle, str]) -> SourceProfile:
    """Return the built-in profile for ``style``."""
    try:
        return BUILTIN_PROFILES[SourceStyle(style)]
    except ValueError:
        known = ", ".join(s.value for s in SourceStyle)
        raise ProfileError(f"Unknown source style {style!r}. Expected one of: {known}")


def load_profile(
    path: Union[str, Path],
    style: Optional[Union[SourceStyle, str]] = None,
) -> SourceProfile:
    """Load a profile from a JSON file.

    Keys missing from the file fall back to the built-in profile for the
    file's ``style`` (or ``style`` if the file omits it), so an override
    file only needs the tables it changes.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ProfileError(f"Profile file not found: {path}")
    except json.JSONDecodeError as e:
        raise ProfileError(f"Profile file {path} is not valid JSON: {e}")

    if not isinstance(raw, dict):
        raise ProfileError(f"Profile file {path} must contain a JSON object")

    base_style = raw.get("style") or style
    if base_style is None:
        raise ProfileError(f"Profile file {path} does not declare a style")

    base = get_profile(base_style).model_dump(mode="json")
    base.update(raw)

    try:
        return SourceProfile.model_validate(base)
    except ValidationError as e:
        raise ProfileError(f"Invalid profile in {path}: {e}")
