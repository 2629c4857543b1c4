"""FastAPI application factory.

Assembles CORS, the error envelope handlers and all API routers.
Run with ``uvicorn taskboard.api.main:app``.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.error_handlers import register_error_handlers
from taskboard.api.routes.audit import router as audit_router
from taskboard.api.routes.health import router as health_router
from taskboard.api.routes.tasks import router as tasks_router
from taskboard.core.logging import setup_logging
from taskboard.core.settings import get_settings


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS: the board UI is served from a separate origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health_router)
app.include_router(tasks_router)
app.include_router(audit_router)

