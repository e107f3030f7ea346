"""Member routes.

Every write runs the member validator first.  A record that fails
validation is returned unsaved, normalized, together with its ordered
failures so the form can re-display it with annotated fields.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, field_validator

from sailclub.api.deps import get_member_service
from sailclub.core.settings import get_settings
from sailclub.members.service import (
    MemberConflictError,
    MemberNotFoundError,
    MemberService,
    MemberValidationError,
)
from sailclub.validation import MemberRecord, ValidationFailure

router = APIRouter(prefix="/members", tags=["members"])


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class MemberBody(BaseModel):
    first_name: str
    last_name: str
    home_phone: str
    spouse_first_name: str | None = None
    spouse_last_name: str | None = None
    street: str | None = None
    city: str | None = None
    province_code: str | None = None
    postal_code: str | None = None
    email: str | None = None
    year_joined: int | None = None
    comment: str | None = None
    task_exempt: bool | None = None
    use_canada_post: bool | None = None

    @field_validator(
        "first_name",
        "last_name",
        "home_phone",
        "spouse_first_name",
        "spouse_last_name",
        "street",
        "city",
        "province_code",
        "postal_code",
        "email",
        "year_joined",
        "comment",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value):
        # Blank form inputs bind as missing, so required fields reject them.
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_record(self, member_id: int = 0) -> MemberRecord:
        return MemberRecord(member_id=member_id, **self.model_dump())


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _serialize_failures(failures: list[ValidationFailure]) -> list[dict[str, str]]:
    return [{"field": f.field, "message": f.message} for f in failures]


def _serialize_member(member) -> dict:
    return {
        "member_id": member.member_id,
        "full_name": member.full_name,
        "first_name": member.first_name,
        "last_name": member.last_name,
        "spouse_first_name": member.spouse_first_name,
        "spouse_last_name": member.spouse_last_name,
        "street": member.street,
        "city": member.city,
        "province_code": member.province_code,
        "postal_code": member.postal_code,
        "home_phone": member.home_phone,
        "email": member.email,
        "year_joined": member.year_joined,
        "comment": member.comment,
        "task_exempt": member.task_exempt,
        "use_canada_post": member.use_canada_post,
    }


def _unprocessable(exc: MemberValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "member": exc.record.to_dict(),
            "failures": _serialize_failures(exc.failures),
        },
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.get("", summary="List members ordered by full name")
def list_members(
    limit: int | None = None,
    offset: int = 0,
    service: MemberService = Depends(get_member_service),
):
    if limit is None:
        limit = get_settings().member_page_size
    return [_serialize_member(m) for m in service.list(limit=limit, offset=offset)]


@router.get("/{member_id}", summary="Get one member")
def get_member(member_id: int, service: MemberService = Depends(get_member_service)):
    try:
        member = service.get(member_id)
    except MemberNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _serialize_member(member)


@router.post("/validate", summary="Validate and normalize without saving")
def validate_member_body(body: MemberBody, service: MemberService = Depends(get_member_service)):
    record = body.to_record()
    failures = service.validate(record)
    return {"member": record.to_dict(), "failures": _serialize_failures(failures)}


@router.post("", status_code=201, summary="Create a member")
def create_member(body: MemberBody, service: MemberService = Depends(get_member_service)):
    try:
        member = service.create(body.to_record())
    except MemberValidationError as exc:
        raise _unprocessable(exc) from exc
    except MemberConflictError as exc:
        raise HTTPException(status_code=409, detail=f"Error: {exc}") from exc
    return _serialize_member(member)


@router.put("/{member_id}", summary="Update a member")
def update_member(
    member_id: int,
    body: MemberBody,
    service: MemberService = Depends(get_member_service),
):
    try:
        member = service.update(member_id, body.to_record(member_id))
    except MemberNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except MemberValidationError as exc:
        raise _unprocessable(exc) from exc
    except MemberConflictError as exc:
        raise HTTPException(status_code=409, detail=f"Update error: {exc}") from exc
    return _serialize_member(member)


@router.delete("/{member_id}", status_code=204, summary="Delete a member")
def delete_member(member_id: int, service: MemberService = Depends(get_member_service)):
    try:
        service.delete(member_id)
    except MemberNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
