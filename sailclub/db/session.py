"""Engine and session factory, built lazily from ``DATABASE_URL``.

SQLite URLs get ``check_same_thread=False`` because FastAPI runs sync
routes on a worker thread pool.  Other backends get ``pool_pre_ping`` so
a restarted PostgreSQL server does not surface as a failed request.
"""
from __future__ import annotations

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from sailclub.core.settings import get_settings

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _engine_options(database_url: str) -> dict:
    if make_url(database_url).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
        logger.info("Database engine created: backend=%s", _engine.dialect.name)
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(),
            autocommit=False,
            autoflush=False,
            class_=Session,
        )
    return _session_factory


def dispose_engine() -> None:
    """Close pooled connections and forget the engine; safe to call twice."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
