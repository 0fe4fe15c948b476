"""
StudyDesk FastAPI Application Entry Point.

A local, single-user adapter over the workspace stores.

Run with: uvicorn studydesk.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studydesk import __version__
from studydesk.api.routes import assignments, notes, resources, subjects
from studydesk.config import Settings, get_settings, sanitize_error
from studydesk.db.seeds import demo_seed
from studydesk.errors import MediaAccessError, NotFoundError, ValidationError
from studydesk.services.workspace import Workspace, open_workspace

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, workspace: Workspace | None = None) -> FastAPI:
    """
    Build the application.

    Pass a workspace to serve already-open stores (tests do this); otherwise
    the lifespan opens the one at settings.storage_path.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager for startup/shutdown."""
        # Startup
        if app.state.workspace is None:
            seed = demo_seed() if settings.seed_demo_data else None
            app.state.workspace = open_workspace(settings, seed)
        yield
        # Shutdown

    app = FastAPI(
        title=settings.app_name,
        description="Assignments, CGPA, quick notes and study resources",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.workspace = workspace

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "fields": exc.fields},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": f"{exc.kind} not found"},
        )

    @app.exception_handler(MediaAccessError)
    async def media_error_handler(request: Request, exc: MediaAccessError) -> JSONResponse:
        logger.warning("Media access failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": sanitize_error(exc, generic_message="Media is unavailable.")},
        )

    # Include routers
    app.include_router(assignments.router)
    app.include_router(subjects.router)
    app.include_router(notes.router)
    app.include_router(resources.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
