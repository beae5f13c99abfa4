"""
Dashboard statistics for one user.
"""

from __future__ import annotations

import calendar
from datetime import date

from sqlalchemy.orm import Session

from ranch_api.models import Animal, Equipment, HealthRecord
from ranch_api.repositories.owned import OwnedRepository
from ranch_api.schemas import DashboardStatsOutput
from ranch_api.services.finance.summary import FinancialSummaryService
from ranch_api.services.operations import InventoryService
from ranch_api.services.predicates import has_equipment_issue, is_health_alert
from ranch_shared.config.constants import AnimalStatus


def month_bounds(today: date) -> tuple[date, date]:
    last_day = calendar.monthrange(today.year, today.month)[1]
    return date(today.year, today.month, 1), date(today.year, today.month, last_day)


class DashboardService:
    def __init__(self, db: Session):
        self._db = db
        self._animals = OwnedRepository(Animal, db)
        self._health = OwnedRepository(HealthRecord, db)
        self._equipment = OwnedRepository(Equipment, db)
        self._inventory = InventoryService(db)
        self._summary = FinancialSummaryService(db)

    def stats(self, user_id: str, today: date | None = None) -> DashboardStatsOutput:
        today = today or date.today()

        total_animals = self._animals.count(user_id, Animal.status == AnimalStatus.ACTIVE)

        health_records = self._health.find_all(user_id, HealthRecord.next_due_date.is_not(None))
        health_alerts = sum(1 for r in health_records if is_health_alert(r, today))

        low_stock_items = len(self._inventory.low_stock_entities(user_id))

        equipment_issues = sum(
            1 for e in self._equipment.find_all(user_id) if has_equipment_issue(e)
        )

        month_start, month_end = month_bounds(today)
        monthly = self._summary.summarize(user_id, month_start, month_end)

        return DashboardStatsOutput(
            total_animals=total_animals,
            health_alerts=health_alerts,
            low_stock_items=low_stock_items,
            equipment_issues=equipment_issues,
            monthly_revenue=monthly.total_income,
            monthly_expenses=monthly.total_expenses,
        )
