"""
Health check endpoints.
Basic liveness plus a detailed check that pings the active database backend.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ranch_shared.config.logging import database_logger as logger
from ranch_shared.config.settings import settings
from ranch_shared.infrastructure.providers import DatabaseProvider


router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health_check():
    """
    Basic health check endpoint.
    Returns service status without checking dependencies.
    """
    return {
        "status": "healthy",
        "service": "ranch-manager-api",
        "environment": settings.environment,
    }


@router.get("/health/detailed")
def detailed_health_check():
    """
    Detailed health check that round-trips a query through the database
    adapter. Returns 503 when the database is unreachable.
    """
    database: dict = {"status": "healthy"}
    try:
        adapter = DatabaseProvider.get_db()
        database["type"] = adapter.name
        adapter.ping()
    except Exception as e:
        logger.warning("Database health check failed", error=str(e))
        database = {**database, "status": "unhealthy", "error": str(e)}

    checks = {
        "service": "ranch-manager-api",
        "environment": settings.environment,
        "status": "healthy" if database["status"] == "healthy" else "degraded",
        "dependencies": {"database": database},
    }

    if checks["status"] != "healthy":
        return JSONResponse(content=checks, status_code=503)
    return checks
