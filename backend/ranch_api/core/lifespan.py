"""
Application lifespan handler.
Manages startup and shutdown events for the FastAPI application.

Startup failures (bad configuration, unreachable database) propagate out of
the lifespan so the server exits before accepting connections.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ranch_api.models import Base
from ranch_shared.config.logging import rest_api_logger as logger, setup_logging
from ranch_shared.config.settings import settings
from ranch_shared.infrastructure.providers import (
    DatabaseAdapter,
    DatabaseConfig,
    DatabaseProvider,
)


def init_database() -> DatabaseAdapter:
    """
    Initialize the provider from settings, check connectivity and create
    missing tables. Idempotent.
    """
    adapter = DatabaseProvider.initialize(DatabaseConfig.from_settings(settings))
    adapter.ping()
    Base.metadata.create_all(bind=adapter.engine)
    logger.info("Database tables created/verified", backend=adapter.name)
    return adapter


def check_production_config() -> None:
    secret_errors = settings.validate_production_secrets()
    if not secret_errors:
        return

    for error in secret_errors:
        logger.error(f"Configuration error: {error}")
    if settings.is_production:
        raise RuntimeError(
            f"Production configuration errors: {'; '.join(secret_errors)}. "
            "Server will not start with insecure configuration."
        )
    logger.warning("Running with insecure defaults (acceptable for development only)")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Runs on startup and shutdown.
    """
    setup_logging()
    check_production_config()

    logger.info("Starting Ranch Manager API", port=settings.port, env=settings.environment)

    try:
        init_database()
    except Exception as e:
        logger.critical("Database initialization failed", error=str(e), exc_info=True)
        raise

    yield

    logger.info("Shutting down Ranch Manager API")
