"""
Financial summary aggregation.

Transactions are grouped by (type, category) and summed as Decimal. The
grouped sum is the primitive the dashboard and budget status reuse.

Invariants:
- total_income == sum of income_by_category totals
- total_expenses == sum of expenses_by_category totals
- net_profit == total_income - total_expenses
- date bounds are inclusive at both ends
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

from sqlalchemy.orm import Session

from ranch_api.models import Transaction
from ranch_api.repositories.owned import OwnedRepository
from ranch_shared.config.constants import TransactionType
from ranch_shared.config.logging import finance_logger as logger, mask_user_id
from ranch_shared.utils.money import ZERO, money


@dataclass
class CategoryTotal:
    category: str
    amount: Decimal


@dataclass
class FinancialSummary:
    total_income: Decimal = field(default_factory=lambda: money(0))
    total_expenses: Decimal = field(default_factory=lambda: money(0))
    net_profit: Decimal = field(default_factory=lambda: money(0))
    income_by_category: list[CategoryTotal] = field(default_factory=list)
    expenses_by_category: list[CategoryTotal] = field(default_factory=list)


def _sorted_totals(totals: dict[str, Decimal]) -> list[CategoryTotal]:
    return [CategoryTotal(category=c, amount=money(totals[c])) for c in sorted(totals)]


class FinancialSummaryService:
    """Aggregations over the caller's transactions."""

    def __init__(self, db: Session):
        self._db = db
        self._repo = OwnedRepository(Transaction, db)

    def _date_criteria(self, start_date: date | None, end_date: date | None) -> list[Any]:
        criteria = []
        if start_date is not None:
            criteria.append(Transaction.date >= start_date)
        if end_date is not None:
            criteria.append(Transaction.date <= end_date)
        return criteria

    def grouped_totals(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        *criteria: Any,
    ) -> dict[tuple[str, str], Decimal]:
        """Sum of amount per (type, category) within the inclusive date range."""
        rows = self._repo.find_all(user_id, *self._date_criteria(start_date, end_date), *criteria)

        totals: dict[tuple[str, str], Decimal] = defaultdict(lambda: ZERO)
        for tx in rows:
            totals[(tx.type, tx.category)] += tx.amount
        return dict(totals)

    def category_totals(
        self,
        user_id: str,
        type: str,
        start_date: date | None = None,
        end_date: date | None = None,
        category: str | None = None,
    ) -> list[CategoryTotal]:
        """Per-category sums of one transaction type, ordered by category."""
        criteria = [Transaction.type == type]
        if category is not None:
            criteria.append(Transaction.category == category)

        grouped = self.grouped_totals(user_id, start_date, end_date, *criteria)
        return _sorted_totals({cat: total for (_, cat), total in grouped.items()})

    def summarize(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> FinancialSummary:
        grouped = self.grouped_totals(user_id, start_date, end_date)

        income: dict[str, Decimal] = defaultdict(lambda: ZERO)
        expenses: dict[str, Decimal] = defaultdict(lambda: ZERO)
        for (tx_type, category), total in grouped.items():
            # Anything that is not income counts as an expense
            if tx_type == TransactionType.INCOME:
                income[category] += total
            else:
                expenses[category] += total

        income_by_category = _sorted_totals(income)
        expenses_by_category = _sorted_totals(expenses)
        total_income = money(sum((c.amount for c in income_by_category), ZERO))
        total_expenses = money(sum((c.amount for c in expenses_by_category), ZERO))

        logger.debug(
            "Financial summary computed",
            user_id=mask_user_id(user_id),
            start_date=start_date,
            end_date=end_date,
            groups=len(grouped),
        )

        return FinancialSummary(
            total_income=total_income,
            total_expenses=total_expenses,
            net_profit=money(total_income - total_expenses),
            income_by_category=income_by_category,
            expenses_by_category=expenses_by_category,
        )
