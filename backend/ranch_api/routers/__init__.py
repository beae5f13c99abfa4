"""
API routers.
"""

from ranch_api.routers.admin import router as admin_router
from ranch_api.routers.auth import router as auth_router
from ranch_api.routers.dashboard import router as dashboard_router
from ranch_api.routers.finance import router as finance_router
from ranch_api.routers.health import router as health_router
from ranch_api.routers.livestock import router as livestock_router
from ranch_api.routers.operations import router as operations_router

__all__ = [
    "admin_router",
    "auth_router",
    "dashboard_router",
    "finance_router",
    "health_router",
    "livestock_router",
    "operations_router",
]
