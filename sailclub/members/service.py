"""Member service: validate, then persist.

Ties the validator to the database.  Province lookups are served by
``ProvinceRepository`` on the same session; the validator itself never
touches the database.

The service flushes but does **not** commit; the caller controls the
transaction boundary.
"""
from __future__ import annotations

import logging
from dataclasses import fields

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sailclub.db.models import Member
from sailclub.db.repositories import MemberRepository, ProvinceRepository
from sailclub.validation import MemberRecord, ValidationFailure, validate_member

logger = logging.getLogger(__name__)

_RECORD_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(MemberRecord))
# member_id is the key and never copied onto an existing row.
_WRITABLE_FIELDS: tuple[str, ...] = tuple(name for name in _RECORD_FIELDS if name != "member_id")


class MemberNotFoundError(LookupError):
    def __init__(self, member_id: int) -> None:
        super().__init__(f"Member {member_id} is not on file")
        self.member_id = member_id


class MemberValidationError(ValueError):
    """Raised when a record fails validation; carries the normalized record."""

    def __init__(self, record: MemberRecord, failures: list[ValidationFailure]) -> None:
        super().__init__(f"{len(failures)} validation failure(s)")
        self.record = record
        self.failures = failures


class MemberConflictError(RuntimeError):
    pass


def record_from_member(member: Member) -> MemberRecord:
    return MemberRecord(**{name: getattr(member, name) for name in _RECORD_FIELDS})


class MemberService:
    """Create, update and delete members through the validator."""

    def __init__(self, db_session: Session, *, current_year: int | None = None) -> None:
        self.db = db_session
        self.members = MemberRepository(db_session)
        self.provinces = ProvinceRepository(db_session)
        self.current_year = current_year

    # -- validate -----------------------------------------------------------

    def validate(self, record: MemberRecord) -> list[ValidationFailure]:
        """Normalize *record* in place and return its failures."""
        return validate_member(record, self.provinces.lookup, current_year=self.current_year)

    # -- read ---------------------------------------------------------------

    def get(self, member_id: int) -> Member:
        member = self.members.get(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    def list(self, limit: int = 100, offset: int = 0) -> list[Member]:
        return self.members.list_by_full_name(limit=limit, offset=offset)

    # -- write --------------------------------------------------------------

    def create(self, record: MemberRecord) -> Member:
        """Validate *record* as a new member and insert it.

        Raises ``MemberValidationError`` when validation fails and
        ``MemberConflictError`` when the database rejects the row.
        """
        record.member_id = 0
        failures = self.validate(record)
        if failures:
            raise MemberValidationError(record, failures)

        values = {name: getattr(record, name) for name in _WRITABLE_FIELDS}
        try:
            member = self.members.create(**values)
        except IntegrityError as exc:
            self.db.rollback()
            raise MemberConflictError(str(exc.orig)) from exc

        logger.info("Member created: member_id=%s", member.member_id)
        return member

    def update(self, member_id: int, record: MemberRecord) -> Member:
        """Validate *record* and copy it onto member *member_id*."""
        member = self.get(member_id)

        record.member_id = member_id
        failures = self.validate(record)
        if failures:
            raise MemberValidationError(record, failures)

        values = {name: getattr(record, name) for name in _WRITABLE_FIELDS}
        try:
            self.members.update(member, **values)
        except IntegrityError as exc:
            self.db.rollback()
            if not self.members.exists(member_id):
                raise MemberNotFoundError(member_id) from exc
            raise MemberConflictError(str(exc.orig)) from exc

        logger.info("Member updated: member_id=%s", member_id)
        return member

    def delete(self, member_id: int) -> None:
        member = self.get(member_id)
        self.members.delete(member)
        logger.info("Member deleted: member_id=%s", member_id)
