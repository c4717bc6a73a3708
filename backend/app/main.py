"""Weekly Focus API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WeeklyFocusError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage built once in the lifespan and held on app.state.storage
    - The lifespan reads the Settings given to create_app (app.state.settings)

Design Decisions:
    - create_app() factory so tests get a fresh app; module-level `app` for uvicorn
    - Static SPA build mounted AFTER API routes so /api/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.api.routes import goals, health, journal, progress
from app.config import Settings, get_settings
from app.infrastructure.observability import setup_logging
from app.infrastructure.storage_factory import build_storage, close_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.storage = await build_storage(settings)
    logger.info(f"Weekly Focus API started (storage={settings.storage_backend})")
    yield
    await close_storage(app.state.storage)
    logger.info("Weekly Focus API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(
        title="Weekly Focus API", version="1.0.0", lifespan=lifespan,
    )
    application.state.settings = settings
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health.router)
    application.include_router(goals.router)
    application.include_router(progress.router)
    application.include_router(journal.router)

    register_error_handlers(application)

    # html=True enables SPA fallback (serves index.html for unknown routes)
    if os.path.isdir(settings.static_dir):
        application.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True), name="static",
        )
    return application


app = create_app()
