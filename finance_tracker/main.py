"""
Finance Tracker - Main Application Entry Point

Records income and expense transactions per user and serves the
dashboard statistics derived from them.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from finance_tracker import __version__
from finance_tracker.core.config import Settings, settings
from finance_tracker.core.logging import setup_logging
from finance_tracker.core.metrics import get_metrics, get_metrics_content_type
from finance_tracker.infrastructure.database import db_manager
from finance_tracker.presentation.api import api_router
from finance_tracker.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and, for the SQL backend, open the engine
    and create the transactions table. Shutdown: dispose of the engine.
    """
    setup_logging()
    logger = structlog.get_logger(__name__)

    if settings.storage_backend == "database":
        db_manager.init()
        await db_manager.create_all()

    logger.info(
        "application_started",
        version=__version__,
        storage_backend=settings.storage_backend,
    )

    yield

    await db_manager.close()
    logger.info("application_stopped")


def create_app(config: Settings = settings) -> FastAPI:
    """Build the FastAPI application with middleware, error handlers and routes."""
    application = FastAPI(
        title="Finance Tracker",
        description="Personal income & expense tracking service",
        version=__version__,
        debug=config.debug,
        lifespan=lifespan,
    )

    # Added last runs first: request ID is set before access logging
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", RequestContextMiddleware.HEADER_NAME],
    )
    application.add_middleware(LoggingMiddleware)
    application.add_middleware(RequestContextMiddleware)

    error_handler_middleware(application)
    application.include_router(api_router)

    if config.metrics_enabled:
        @application.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            return Response(content=get_metrics(), media_type=get_metrics_content_type())

    @application.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    return application


app = create_app()


def run() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    uvicorn.run(
        "finance_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
