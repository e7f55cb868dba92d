"""
barprep FastAPI Application

Main entry point for the API server.
Run with: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from api.config import get_settings
from api.dependencies import get_event_service
from api.middleware.errors import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.routers import events, health, packing, recipes

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()

    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    if not settings.sheets_enabled:
        logger.info("Google Sheets not configured, using bundled recipes and sample event")

    await run_in_threadpool(get_event_service().load)

    yield

    # Shutdown
    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="API for cocktail catering packing lists and event prep",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(
        recipes.router,
        prefix="/api/v1/recipes",
        tags=["Recipes"]
    )
    app.include_router(
        events.router,
        prefix="/api/v1/events",
        tags=["Events"]
    )
    app.include_router(
        packing.router,
        prefix="/api/v1/packing",
        tags=["Packing"]
    )

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
