"""
Dashboard statistics endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ranch_api.routers._common import current_user, get_db, get_user_id
from ranch_api.schemas import DashboardStatsOutput
from ranch_api.services.dashboard import DashboardService


router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsOutput)
def get_dashboard_stats(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> DashboardStatsOutput:
    """
    Headline counters for the caller's ranch plus this month's revenue and
    expenses.
    """
    return DashboardService(db).stats(get_user_id(user))
