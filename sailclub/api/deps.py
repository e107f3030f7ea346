"""FastAPI dependency injection: database sessions and service factories."""
from __future__ import annotations

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from sailclub.db.repositories import ProvinceRepository
from sailclub.db.session import get_session_factory
from sailclub.members.service import MemberService


def get_db() -> Generator[Session, None, None]:
    """Yield a SQLAlchemy session; commit on success, rollback on error."""
    factory = get_session_factory()
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_member_service(db: Session = Depends(get_db)) -> MemberService:
    """Return a MemberService bound to the current DB session."""
    return MemberService(db)


def get_province_repository(db: Session = Depends(get_db)) -> ProvinceRepository:
    return ProvinceRepository(db)
