# -*- coding: utf-8 -*-
"""
FitLife API

Nutrition, workout and body-progress logging with per-day and per-period
summaries. Every route except health and register/login needs a bearer token.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .app_db import init_app_db
from .config import settings
from .errors import install_error_handlers
from .nutrition.api import router as nutrition_router
from .progress.api import router as progress_router
from .summary.api import router as dashboard_router
from .users.api import router as users_router
from .workouts.api import router as workouts_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="FitLife API",
    description="Personal fitness tracking: nutrition, workouts and progress",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)


@app.on_event("startup")
def _startup_init_db() -> None:
    init_app_db(settings.app_db_path)


# Ensure the app DB exists even when lifespan events are not triggered (e.g. some test clients).
init_app_db(settings.app_db_path)

app.include_router(users_router)
app.include_router(nutrition_router)
app.include_router(workouts_router)
app.include_router(progress_router)
app.include_router(dashboard_router)


@app.get("/api/v1/health")
def health() -> dict:
    return {
        "success": True,
        "message": "FitLife API is running",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting FitLife API on %s:%s", settings.host, settings.port)
    uvicorn.run("fitlife.api:app", host=settings.host, port=settings.port, reload=False)
