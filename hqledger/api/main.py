"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hqledger import __version__
from hqledger.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from hqledger.api.middleware.error_handler import setup_exception_handlers
from hqledger.api.routes import (
    documents_router,
    format_router,
    health_router,
    payments_router,
    reports_router,
)
from hqledger.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Wires renderers on startup so the first request does not pay for it.
    """
    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
    )

    from hqledger.application.services import (
        get_document_service,
        get_report_exporters,
        reset_services,
    )

    service = get_document_service()
    logger.info(
        "renderers_ready",
        document_formats=service.formats,
        report_formats=sorted(get_report_exporters()),
    )

    logger.info("application_started")

    yield

    logger.info("application_stopping")
    reset_services()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title="HQ Ledger API",
        description="Invoice and proposal rendering, UPI payments and GST reports",
        version=__version__,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Response-Time", "Content-Disposition"],
        )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(documents_router)
    app.include_router(payments_router)
    app.include_router(format_router)
    app.include_router(reports_router)

    # Root health endpoint (for k8s/docker health checks)
    @app.get("/health")
    async def root_health() -> dict[str, str]:
        """Simple health check at root level."""
        return {
            "status": "healthy",
            "version": __version__,
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "hqledger.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
