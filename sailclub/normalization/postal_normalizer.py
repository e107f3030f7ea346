"""Postal / zip code normalizer.

Two regimes are supported:

* Canada: ``A1A 1A1`` with Canada Post's restricted letter sets.
* United States: 5-digit ZIP or 9-digit ZIP+4 (``12345-6789``).

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

from sailclub.normalization.text_normalizer import extract_digits

logger = logging.getLogger(__name__)

# D, F, I, O, Q, U never appear; W and Z never lead.  ASCII only: no
# Arabic-Indic digits, no Kelvin sign folding to K.
_CA_POSTAL_RE = re.compile(
    r"[ABCEGHJ-NPRSTVXY][0-9][ABCEGHJ-NPRSTV-Z] ?[0-9][ABCEGHJ-NPRSTV-Z][0-9]",
    re.IGNORECASE | re.ASCII,
)

_ZIP5_LEN = 5
_ZIP9_LEN = 9


def validate_canadian_postal_code(text: str | None) -> bool:
    """Return ``True`` if *text* is a Canadian postal code.

    ``None`` is valid (absence is not an error at this layer); an empty or
    whitespace-only string is not.  Matching is case-insensitive and
    allows a single optional space after the third character.
    """
    if text is None:
        return True

    stripped = text.strip()
    if not stripped:
        return False

    return _CA_POSTAL_RE.fullmatch(stripped) is not None


def format_canadian_postal_code(text: str | None) -> str | None:
    """Return *text* as ``A1A 1A1``.  Does not validate."""
    if text is None:
        return None

    stripped = text.strip()
    if len(stripped) == 6:
        stripped = f"{stripped[:3]} {stripped[3:]}"
    return stripped.upper()


def validate_and_format_us_zip(text: str | None) -> tuple[bool, str | None]:
    """Validate a US zip code and return ``(ok, normalized)``.

    Returns
    -------
    tuple[bool, str | None]
        * ``(True, "")`` for ``None`` or ``""``; the zip is optional.
        * ``(True, "12345")`` when the input holds exactly 5 digits.
        * ``(True, "12345-6789")`` when it holds exactly 9 digits.
        * ``(False, text)`` otherwise; *text* is returned unchanged and
          must not be treated as normalized.
    """
    if not text:
        return True, ""

    digits = extract_digits(text) or ""
    if len(digits) == _ZIP5_LEN:
        return True, digits
    if len(digits) == _ZIP9_LEN:
        return True, f"{digits[:5]}-{digits[5:]}"

    logger.debug("validate_and_format_us_zip: rejected input with %d digits", len(digits))
    return False, text
