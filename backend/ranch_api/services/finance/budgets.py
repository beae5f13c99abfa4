"""
Budget status: actual spending against each active budget.

The window of a budget is the calendar period containing `today`
(ISO week Monday-Sunday, month, quarter or year) clipped to the budget's
own [start_date, end_date]. Spending is the sum of the caller's expense
transactions in the budget's category inside that window.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.orm import Session

from ranch_api.models import Budget
from ranch_api.repositories.owned import OwnedRepository
from ranch_api.services.finance.summary import FinancialSummaryService
from ranch_shared.config.constants import BudgetPeriod, BudgetState, TransactionType
from ranch_shared.utils.money import ZERO, money


def period_bounds(period: str, today: date) -> tuple[date, date]:
    """First and last day of the calendar period that contains `today`."""
    if period == BudgetPeriod.WEEKLY:
        start = today - timedelta(days=today.weekday())
        return start, start + timedelta(days=6)
    if period == BudgetPeriod.QUARTERLY:
        first_month = 3 * ((today.month - 1) // 3) + 1
        last_month = first_month + 2
        return (
            date(today.year, first_month, 1),
            date(today.year, last_month, calendar.monthrange(today.year, last_month)[1]),
        )
    if period == BudgetPeriod.YEARLY:
        return date(today.year, 1, 1), date(today.year, 12, 31)
    # monthly, and the fallback for unknown periods
    return (
        date(today.year, today.month, 1),
        date(today.year, today.month, calendar.monthrange(today.year, today.month)[1]),
    )


def budget_window(budget: Budget, today: date) -> tuple[date, date] | None:
    """Current period clipped to the budget dates; None when they don't overlap."""
    start, end = period_bounds(budget.period, today)
    start = max(start, budget.start_date)
    end = min(end, budget.end_date)
    if start > end:
        return None
    return start, end


def percent_of(spent: Decimal, budgeted: Decimal) -> Decimal:
    if budgeted <= ZERO:
        return Decimal("0.00") if spent <= ZERO else Decimal("100.00")
    return (spent / budgeted * 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


@dataclass
class BudgetStatus:
    budget_id: int
    name: str
    category: str
    period: str
    budgeted_amount: Decimal
    spent: Decimal
    remaining: Decimal
    percent_used: Decimal
    alert_threshold: int
    window_start: date | None
    window_end: date | None
    status: str
    is_alert: bool


class BudgetStatusService:
    def __init__(self, db: Session):
        self._db = db
        self._budgets = OwnedRepository(Budget, db)
        self._summary = FinancialSummaryService(db)

    def evaluate(self, budget: Budget, user_id: str, today: date) -> BudgetStatus:
        window = budget_window(budget, today)
        spent = money(0)
        if window is not None:
            totals = self._summary.category_totals(
                user_id,
                TransactionType.EXPENSE,
                window[0],
                window[1],
                category=budget.category,
            )
            spent = money(sum((t.amount for t in totals), ZERO))

        budgeted = money(budget.budgeted_amount)
        percent = percent_of(spent, budgeted)
        threshold = budget.alert_threshold

        if spent > budgeted:
            state = BudgetState.OVER
        elif percent >= threshold:
            state = BudgetState.WARNING
        else:
            state = BudgetState.OK

        return BudgetStatus(
            budget_id=budget.id,
            name=budget.name,
            category=budget.category,
            period=budget.period,
            budgeted_amount=budgeted,
            spent=spent,
            remaining=money(budgeted - spent),
            percent_used=percent,
            alert_threshold=threshold,
            window_start=window[0] if window else None,
            window_end=window[1] if window else None,
            status=state,
            is_alert=percent >= threshold,
        )

    def status(
        self,
        user_id: str,
        period: str | None = None,
        today: date | None = None,
    ) -> list[BudgetStatus]:
        """Status of every active budget, optionally only those of one period."""
        today = today or date.today()
        criteria = [Budget.is_active.is_(True)]
        if period:
            criteria.append(Budget.period == period)

        budgets = self._budgets.find_all(
            user_id, *criteria, order_by=[Budget.name.asc(), Budget.id.asc()]
        )
        return [self.evaluate(b, user_id, today) for b in budgets]
