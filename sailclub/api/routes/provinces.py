"""GET /provinces: reference data for the member form's province list."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from sailclub.api.deps import get_province_repository
from sailclub.db.repositories import ProvinceRepository

router = APIRouter(prefix="/provinces", tags=["provinces"])


@router.get("", summary="List provinces and states ordered by name")
def list_provinces(repo: ProvinceRepository = Depends(get_province_repository)):
    return [
        {"code": p.code, "name": p.name, "country_code": p.country_code}
        for p in repo.list_by_name()
    ]
