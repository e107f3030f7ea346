"""Word capitalization and digit extraction.

``capitalize`` is deliberately simpler than ``str.title()``: it splits on
whitespace only, so hyphens and apostrophes do not start a new word
(``"o'brien"`` → ``"O'brien"``, ``"mary-jane"`` → ``"Mary-jane"``).
"""
from __future__ import annotations


def capitalize(text: str | None) -> str:
    """Return *text* with each whitespace-separated word capitalized.

    The first character of every word is upper-cased and the remainder
    lower-cased.  Runs of whitespace collapse to a single space and the
    result is stripped.  ``None`` returns ``""``.
    """
    if text is None:
        return ""

    words = [word[0].upper() + word[1:].lower() for word in text.split() if word]
    return " ".join(words)


def extract_digits(text: str | None) -> str | None:
    """Return only the ASCII digits 0-9 of *text*, in order.

    ``None`` returns ``None`` (not ``""``) so callers can distinguish a
    missing value from a value that contained no digits.
    """
    if text is None:
        return None

    return "".join(char for char in text if "0" <= char <= "9")
