"""
Storefront Site API - FastAPI Application

Main entry point for the FastAPI application.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from storefront.config import get_settings
from storefront.core.database import close_db, init_db
from storefront.core.exceptions import StorageUnavailableError, StorefrontError
from storefront.core.rate_limit import build_login_limiter
from storefront.routers import (
    auth_router,
    health_router,
    layouts_router,
    playlist_router,
    site_router,
    theme_router,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Suppress noisy third-party loggers
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    logger.info("Starting Storefront Site API...")
    settings = get_settings()

    logger.info("Initializing database connection...")
    try:
        await init_db()
        logger.info("Database connection established")
    except (SQLAlchemyError, OSError) as e:
        # Public reads fall back to defaults; writes will fail until the database is back
        logger.warning(f"Database not reachable at startup: {e}")

    logger.info(f"Storefront Site API started in {settings.environment} mode")

    yield

    # Shutdown
    logger.info("Shutting down Storefront Site API...")
    await app.state.login_limiter.close()
    await close_db()
    logger.info("Storefront Site API shutdown complete")


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """Map domain errors to their HTTP status."""
    if isinstance(exc, StorageUnavailableError):
        logger.error(f"Storage unavailable on {request.method} {request.url.path}: {exc.message}")
        detail = "Internal error"
    else:
        detail = exc.message

    return JSONResponse(status_code=exc.status_code, content={"detail": detail})


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Database errors never leak details to the caller."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal error"})


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Storefront Site API",
        description="Restaurant homepage layout, theme and admin console API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # One limiter per process, shared by all login requests
    app.state.login_limiter = build_login_limiter(settings)

    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)

    # Register routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(layouts_router)
    app.include_router(theme_router)
    app.include_router(playlist_router)
    app.include_router(site_router)

    # Root endpoint
    @app.get("/")
    async def root():
        return {
            "name": "Storefront Site API",
            "version": "1.0.0",
            "docs": "/docs",
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
