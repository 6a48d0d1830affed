from dataclasses import dataclass


THOUSANDS_SEPARATOR = ","


@dataclass(frozen=True)
class NormalizedMessage:
    """Notification text prepared for pattern matching.

    ``text`` is the lowercased form the keyword and amount matchers run on.
    ``display`` keeps the sender's casing (separators still removed) for the
    merchant matcher, which is case-insensitive but must return the name as
    it was written.
    """

    text: str
    display: str


def strip_separators(text: str) -> str:
    # "1,234.50" -> "1234.50"
    return text.replace(THOUSANDS_SEPARATOR, "")


def normalize(text: str) -> NormalizedMessage:
    if not text:
        return NormalizedMessage(text="", display="")

    display = strip_separators(text)
    return NormalizedMessage(text=display.lower(), display=display)
