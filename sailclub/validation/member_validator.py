"""Member record validator.

Normalizes a ``MemberRecord`` in place and collects every field-level
failure in one pass.

Rules applied in order
----------------------
1. Trim ``province_code``, ``email`` and ``comment``.
2. Capitalize names, street and city.
3. Derive ``full_name`` from member and spouse names.
4. Upper-case and look up ``province_code``; validate / format the
   postal or zip code for the province's country.
5. Reduce ``home_phone`` to digits; require 10 and format ``DDD-DDD-DDDD``.
6. Check the email address grammar.
7. Require ``year_joined`` for a new record.
8. Reject a ``year_joined`` in the future.
9. Default ``task_exempt`` and ``use_canada_post`` to ``False``.
10. Require email, or the full mailing address when the member has
    restricted communication to Canada Post.

Later rules depend on earlier normalization, and the order of the
returned failures follows the order above.  No rule stops the sequence.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from datetime import date

from sailclub.normalization import (
    capitalize,
    extract_digits,
    format_canadian_postal_code,
    is_valid_email,
    validate_and_format_us_zip,
    validate_canadian_postal_code,
)
from sailclub.validation.record import MemberRecord, ProvinceLookup, ValidationFailure

logger = logging.getLogger(__name__)

COUNTRY_CANADA = "CA"
COUNTRY_USA = "US"

_PHONE_DIGITS = 10

# Field -> label used when the member has chosen Canada Post.
_CANADA_POST_REQUIRED: tuple[tuple[str, str], ...] = (
    ("street", "Street Address"),
    ("city", "City/Town"),
    ("province_code", "Province Code"),
    ("postal_code", "Postal Code"),
)


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def derive_full_name(
    last_name: str,
    first_name: str,
    spouse_first_name: str,
    spouse_last_name: str,
) -> str:
    """Return the ``"Last, First & ..."`` display name for a membership.

    A missing spouse first name overrides every other spouse branch, so
    ``("Smith", "John", "", "Doe")`` gives ``"Smith, John & Doe"``.
    """
    if not spouse_last_name and not spouse_first_name:
        return f"{last_name}, {first_name}"

    if not spouse_last_name or spouse_last_name == last_name:
        full_name = f"{last_name}, {first_name} & {spouse_first_name}"
    else:
        full_name = f"{last_name}, {first_name} & {spouse_last_name}, {spouse_first_name}"

    if not spouse_first_name:
        full_name = f"{last_name}, {first_name} & {spouse_last_name}"
    return full_name


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _innermost_message(exc: BaseException) -> str:
    """Return the message of the root exception in *exc*'s chain."""
    seen: set[int] = set()
    root = exc
    while id(root) not in seen:
        seen.add(id(root))
        nxt = root.__cause__ or root.__context__
        if nxt is None:
            break
        root = nxt
    return str(root) or type(root).__name__


def _trim_free_text(record: MemberRecord) -> None:
    if record.province_code is not None:
        record.province_code = record.province_code.strip()
    if record.email is not None:
        record.email = record.email.strip()
    if record.comment is not None:
        record.comment = record.comment.strip()


def _capitalize_names(record: MemberRecord) -> None:
    record.first_name = capitalize(record.first_name)
    record.last_name = capitalize(record.last_name)
    record.spouse_first_name = capitalize(record.spouse_first_name)
    record.spouse_last_name = capitalize(record.spouse_last_name)
    record.street = capitalize(record.street)
    record.city = capitalize(record.city)


def _check_postal_code(record: MemberRecord, lookup: ProvinceLookup) -> list[ValidationFailure]:
    if not record.province_code:
        if record.postal_code:
            return [
                ValidationFailure(
                    "province_code",
                    "The province/state code is required to validate the postal/zip code",
                )
            ]
        return []

    record.province_code = record.province_code.upper()

    try:
        province = lookup(record.province_code)
    except Exception as exc:
        logger.warning("Province lookup failed: %s", type(exc).__name__)
        return [ValidationFailure("province_code", _innermost_message(exc))]

    if province is None:
        return [ValidationFailure("province_code", "Province code not on file")]

    if province.country_code == COUNTRY_CANADA:
        if not validate_canadian_postal_code(record.postal_code):
            return [ValidationFailure("postal_code", "The postal code must be in format A1A 1A1")]
        record.postal_code = format_canadian_postal_code(record.postal_code)

    elif province.country_code == COUNTRY_USA:
        ok, zip_code = validate_and_format_us_zip(record.postal_code)
        if not ok:
            return [ValidationFailure("postal_code", "The zip code must contain 5 or 9 digits")]
        record.postal_code = zip_code

    return []


def _check_home_phone(record: MemberRecord) -> list[ValidationFailure]:
    digits = extract_digits(record.home_phone)
    record.home_phone = digits

    if digits is None or len(digits) != _PHONE_DIGITS:
        return [ValidationFailure("home_phone", "The phone number must be 10 digits long")]

    record.home_phone = f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"
    return []


def _check_email_format(record: MemberRecord) -> list[ValidationFailure]:
    if is_valid_email(record.email):
        return []
    return [ValidationFailure("email", "The email address is in an incorrect format")]


def _check_year_joined(record: MemberRecord, current_year: int) -> list[ValidationFailure]:
    failures: list[ValidationFailure] = []
    if record.member_id == 0 and record.year_joined is None:
        failures.append(
            ValidationFailure("year_joined", "Year Joined cannot be empty for a new record")
        )
    if record.year_joined is not None and record.year_joined > current_year:
        failures.append(
            ValidationFailure(
                "year_joined",
                "The year the member joined the club cannot be in the future",
            )
        )
    return failures


def _default_flags(record: MemberRecord) -> None:
    if record.task_exempt is None:
        record.task_exempt = False
    if record.use_canada_post is None:
        record.use_canada_post = False


def _check_contact_channel(record: MemberRecord) -> list[ValidationFailure]:
    if not record.use_canada_post:
        if not record.email:
            return [
                ValidationFailure(
                    "email",
                    "Email address is required unless member has restricted "
                    "communication to Canada Post",
                )
            ]
        return []

    return [
        ValidationFailure(field, f"Member wants to use Canada Post - {label} is required")
        for field, label in _CANADA_POST_REQUIRED
        if not getattr(record, field)
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_member(
    record: MemberRecord,
    lookup: ProvinceLookup,
    *,
    current_year: int | None = None,
) -> list[ValidationFailure]:
    """Normalize *record* in place and return its validation failures.

    Parameters
    ----------
    record:
        The submitted member.  Mutated: trimmed, capitalized, full name
        derived, codes and phone formatted, flags defaulted.
    lookup:
        Resolves an upper-cased province/state code to a
        ``ProvinceOrState``; returns ``None`` when the code is not on file.
        An exception raised by *lookup* is reported as a failure on
        ``province_code`` and the postal check is skipped.
    current_year:
        Reference year for the "joined in the future" rule.  Defaults to
        the current calendar year.

    Returns
    -------
    list[ValidationFailure]
        In rule order; empty when the record may be saved.  Never raises
        for bad input.
    """
    if current_year is None:
        current_year = date.today().year

    failures: list[ValidationFailure] = []

    _trim_free_text(record)
    _capitalize_names(record)
    record.full_name = derive_full_name(
        record.last_name,
        record.first_name,
        record.spouse_first_name,
        record.spouse_last_name,
    )

    failures.extend(_check_postal_code(record, lookup))
    failures.extend(_check_home_phone(record))
    failures.extend(_check_email_format(record))
    failures.extend(_check_year_joined(record, current_year))
    _default_flags(record)
    failures.extend(_check_contact_channel(record))

    if failures:
        logger.debug(
            "validate_member: %d failure(s) on fields %s",
            len(failures),
            sorted({f.field for f in failures}),
        )
    return failures
