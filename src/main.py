"""
Main application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.app import create_app
from src.config.logging import configure_logging, get_logger
from src.config.settings import settings

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting Support Portal Gateway",
        environment=settings.ENVIRONMENT,
        crm_configured=bool(settings.HUBSPOT_ACCESS_TOKEN),
    )
    if not settings.HUBSPOT_ACCESS_TOKEN:
        logger.warning("HUBSPOT_ACCESS_TOKEN is not set, CRM calls will fail")

    yield

    logger.info("Shutting down Support Portal Gateway")


def create_main_app() -> FastAPI:
    """Create the main FastAPI application."""
    app = create_app()
    app.router.lifespan_context = lifespan
    return app


# Create the main app
app = create_main_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Support Portal Gateway server")

    uvicorn.run(
        "src.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
