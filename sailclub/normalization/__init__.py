"""Normalization package.

Pure, stateless helpers used by the member validator.  Each helper takes
a raw value as submitted on the member form and returns either a
canonical form or a validity flag.

``None`` handling is part of each helper's contract and differs between
them on purpose: callers rely on it to tell "no input" apart from
"input with nothing usable in it".
"""
from sailclub.normalization.email_normalizer import is_valid_email
from sailclub.normalization.postal_normalizer import (
    format_canadian_postal_code,
    validate_and_format_us_zip,
    validate_canadian_postal_code,
)
from sailclub.normalization.text_normalizer import capitalize, extract_digits

__all__ = [
    "capitalize",
    "extract_digits",
    "format_canadian_postal_code",
    "is_valid_email",
    "validate_and_format_us_zip",
    "validate_canadian_postal_code",
]
