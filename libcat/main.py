"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from libcat.config import configure_logging, get_settings
from libcat.database import dispose_engine, initialize_database
from libcat.infrastructure.circulation.routers import circulation
from libcat.infrastructure.common.exception_handlers import register_exception_handlers
from libcat.infrastructure.library.routers import books
from libcat.infrastructure.reporting.routers import reports

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up logging and the database engine, dispose the engine on shutdown."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT, version=settings.VERSION)
    try:
        yield
    finally:
        dispose_engine()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Library catalogue with circulation tracking and borrowing reports",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Static /books/... paths must be registered before /books/{isbn}
    app.include_router(reports.router, prefix=settings.API_V1_PREFIX)
    app.include_router(books.router, prefix=settings.API_V1_PREFIX)
    app.include_router(circulation.router, prefix=settings.API_V1_PREFIX)

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, Any]:
        return {
            "name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "docs": "/docs",
            "api": settings.API_V1_PREFIX,
        }

    @app.get(f"{settings.API_V1_PREFIX}/")
    def api_root() -> dict[str, Any]:
        return {
            "name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "endpoints": {
                "books": f"{settings.API_V1_PREFIX}/books",
                "search": f"{settings.API_V1_PREFIX}/books/search",
                "borrowing_report": f"{settings.API_V1_PREFIX}/books/borrowing-report",
                "bulk_upload": f"{settings.API_V1_PREFIX}/books/bulk-upload",
            },
        }

    return app


app = create_app()
