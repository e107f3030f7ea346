"""FastAPI application factory.

Assembles CORS and all API routers.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sailclub.api.routes.health import router as health_router
from sailclub.api.routes.members import router as members_router
from sailclub.api.routes.provinces import router as provinces_router
from sailclub.core.logging import setup_logging
from sailclub.core.settings import get_settings
from sailclub.db.session import dispose_engine


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield
    dispose_engine()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(provinces_router)
app.include_router(members_router)
