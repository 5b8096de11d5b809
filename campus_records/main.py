"""
Main application module.

This module builds the FastAPI application: middleware, error handlers,
the faculty and student routers, and the static mount for uploaded files.
The database adapter is opened in the lifespan and closed on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from campus_records import __version__
from campus_records.middleware.error_handler import add_error_handlers
from campus_records.routes.faculty import router as faculty_router
from campus_records.routes.students import router as students_router
from campus_records.utils.config import Settings, get_settings
from campus_records.utils.database import close_db, init_db
from campus_records.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the records store for the lifetime of the application."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    logger.info("Starting up application...")
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    app.state.db = await init_db(settings)
    logger.info("Application startup complete")
    try:
        yield
    finally:
        logger.info("Shutting down application...")
        await close_db(app.state.db)
        logger.info("Application shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings. Defaults to the cached environment settings.

    Returns:
        FastAPI: The configured application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Campus Records API",
        description="Faculty and student record management",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    add_error_handlers(app)

    app.include_router(faculty_router)
    app.include_router(students_router)

    # Directory is created in the lifespan, not at import time
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads"
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
