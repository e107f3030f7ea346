"""Email address grammar check.

Only the address syntax is checked; there are no DNS lookups or deliverability
tests.  Whether an email is *required* is a member-level rule, so empty
input is accepted here.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

from email_validator import EmailNotValidError, validate_email

logger = logging.getLogger(__name__)


def is_valid_email(text: str | None) -> bool:
    """Return ``True`` if *text* is a syntactically valid email address.

    ``None`` and ``""`` are treated as valid.
    """
    if not text:
        return True

    try:
        validate_email(
            text,
            check_deliverability=False,
            globally_deliverable=False,
        )
    except EmailNotValidError:
        logger.debug("is_valid_email: rejected input (length=%d)", len(text))
        return False
    return True
