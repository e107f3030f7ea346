"""Value types shared by the validator and its callers."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass


@dataclass
class MemberRecord:
    """A member as submitted for create or edit.

    ``member_id == 0`` marks a record that has not been persisted yet.
    The validator rewrites the textual fields in place.
    """

    first_name: str | None = None
    last_name: str | None = None
    member_id: int = 0
    full_name: str | None = None
    spouse_first_name: str | None = None
    spouse_last_name: str | None = None
    street: str | None = None
    city: str | None = None
    province_code: str | None = None
    postal_code: str | None = None
    home_phone: str | None = None
    email: str | None = None
    year_joined: int | None = None
    comment: str | None = None
    task_exempt: bool | None = None
    use_canada_post: bool | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class ProvinceOrState:
    code: str
    name: str
    country_code: str


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    message: str


# Returns None when the code is not on file; raises on lookup errors.
ProvinceLookup = Callable[[str], ProvinceOrState | None]
