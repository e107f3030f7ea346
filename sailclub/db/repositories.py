from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from sailclub.db import models
from sailclub.validation.record import ProvinceOrState

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def create(self, **kwargs) -> ModelT:
        entity = self.model(**kwargs)
        self.db.add(entity)
        self.db.flush()
        return entity

    def get(self, entity_id: object) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def list(self, limit: int = 100, offset: int = 0) -> list[ModelT]:
        stmt = select(self.model).offset(offset).limit(limit)
        return self.db.execute(stmt).scalars().all()

    def update(self, entity: ModelT, **kwargs) -> ModelT:
        for key, value in kwargs.items():
            setattr(entity, key, value)
        self.db.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()


class ProvinceRepository(BaseRepository[models.Province]):
    model = models.Province

    def lookup(self, code: str) -> ProvinceOrState | None:
        """Return the province/state for *code*, or ``None`` if not on file.

        Matching is exact; callers upper-case the code first.  Database
        errors propagate to the caller.
        """
        province = self.db.execute(
            select(models.Province).where(models.Province.code == code)
        ).scalar_one_or_none()
        if province is None:
            return None
        return ProvinceOrState(code=province.code, name=province.name, country_code=province.country_code)

    def list_by_name(self) -> list[models.Province]:
        stmt = select(models.Province).order_by(models.Province.name)
        return self.db.execute(stmt).scalars().all()

    def count_by_country(self) -> dict[str, int]:
        stmt = (
            select(models.Province.country_code, func.count())
            .group_by(models.Province.country_code)
            .order_by(models.Province.country_code)
        )
        return {country: count for country, count in self.db.execute(stmt).all()}


class MemberRepository(BaseRepository[models.Member]):
    model = models.Member

    def list_by_full_name(self, limit: int = 100, offset: int = 0) -> list[models.Member]:
        stmt = (
            select(models.Member)
            .order_by(models.Member.full_name, models.Member.member_id)
            .offset(offset)
            .limit(limit)
        )
        return self.db.execute(stmt).scalars().all()

    def exists(self, member_id: int) -> bool:
        stmt = select(models.Member.member_id).where(models.Member.member_id == member_id)
        return self.db.execute(stmt).first() is not None
