"""GET /health: liveness plus province table reachability.

Validation cannot run without the province/state reference data, so the
check counts it per country.  A database error reports ``degraded`` with
HTTP 503 instead of raising.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sailclub.api.deps import get_db
from sailclub.core.settings import get_settings
from sailclub.db.repositories import ProvinceRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", summary="Service and database health check")
def health_check(response: Response, db: Session = Depends(get_db)) -> dict:
    settings = get_settings()
    body = {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
    }

    try:
        provinces = ProvinceRepository(db).count_by_country()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.warning("Health check could not reach the database: %s", type(exc).__name__)
        response.status_code = 503
        body.update(status="degraded", database="unavailable", provinces={})
        return body

    body.update(database="ok", provinces=provinces)
    if not provinces:
        body["status"] = "degraded"
    return body
