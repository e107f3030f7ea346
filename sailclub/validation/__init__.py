"""Member record validation.

``validate_member`` normalizes a submitted ``MemberRecord`` in place and
returns the ordered list of ``ValidationFailure`` objects.  An empty list
means the record may be persisted.
"""
from sailclub.validation.member_validator import derive_full_name, validate_member
from sailclub.validation.record import (
    MemberRecord,
    ProvinceLookup,
    ProvinceOrState,
    ValidationFailure,
)

__all__ = [
    "MemberRecord",
    "ProvinceLookup",
    "ProvinceOrState",
    "ValidationFailure",
    "derive_full_name",
    "validate_member",
]
