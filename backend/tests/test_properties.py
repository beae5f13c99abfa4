"""
Property-based tests with Hypothesis for the aggregation rules.
"""

from datetime import date, timedelta
from decimal import Decimal
from types import SimpleNamespace

from hypothesis import HealthCheck, given, settings, strategies as st
from sqlalchemy import delete

from ranch_api.models import Transaction
from ranch_api.services.finance import FinancialSummaryService
from ranch_api.services.finance.budgets import percent_of, period_bounds
from ranch_api.services.finance.ledger import split_balance
from ranch_api.services.predicates import is_low_stock
from tests.conftest import OWNER_ID


amounts = st.decimals(
    min_value=Decimal("0.01"),
    max_value=Decimal("99999.99"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)

transactions = st.lists(
    st.tuples(
        st.sampled_from(["income", "expense"]),
        st.sampled_from(["Feed", "Fuel", "Sales", "Vet"]),
        amounts,
        st.integers(min_value=0, max_value=60),
    ),
    max_size=25,
)

BASE_DAY = date(2024, 1, 1)


class TestSummaryProperties:
    @given(rows=transactions)
    @settings(max_examples=40, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_totals_equal_category_sums(self, db_session, rows):
        """Property: totals are the sum of their categories; net = income - expenses."""
        db_session.execute(delete(Transaction))
        db_session.add_all(
            Transaction(
                user_id=OWNER_ID,
                type=tx_type,
                category=category,
                amount=amount,
                date=BASE_DAY + timedelta(days=offset),
            )
            for tx_type, category, amount, offset in rows
        )
        db_session.commit()

        summary = FinancialSummaryService(db_session).summarize(OWNER_ID)

        expected_income = sum((a for t, _, a, _ in rows if t == "income"), Decimal("0"))
        expected_expenses = sum((a for t, _, a, _ in rows if t != "income"), Decimal("0"))

        assert summary.total_income == expected_income
        assert summary.total_expenses == expected_expenses
        assert summary.total_income == sum((c.amount for c in summary.income_by_category), Decimal("0"))
        assert summary.total_expenses == sum((c.amount for c in summary.expenses_by_category), Decimal("0"))
        assert summary.net_profit == summary.total_income - summary.total_expenses

    @given(
        rows=transactions,
        start=st.integers(min_value=0, max_value=60),
        length=st.integers(min_value=0, max_value=60),
    )
    @settings(max_examples=40, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_range_includes_both_bounds(self, db_session, rows, start, length):
        """Property: a transaction dated on either bound is counted."""
        db_session.execute(delete(Transaction))
        db_session.add_all(
            Transaction(
                user_id=OWNER_ID,
                type=tx_type,
                category=category,
                amount=amount,
                date=BASE_DAY + timedelta(days=offset),
            )
            for tx_type, category, amount, offset in rows
        )
        db_session.commit()

        start_date = BASE_DAY + timedelta(days=start)
        end_date = start_date + timedelta(days=length)
        summary = FinancialSummaryService(db_session).summarize(OWNER_ID, start_date, end_date)

        in_range = [
            (t, a) for t, _, a, offset in rows
            if start_date <= BASE_DAY + timedelta(days=offset) <= end_date
        ]
        assert summary.total_income == sum((a for t, a in in_range if t == "income"), Decimal("0"))
        assert summary.total_expenses == sum((a for t, a in in_range if t != "income"), Decimal("0"))


class TestPredicateProperties:
    @given(
        quantity=st.decimals(min_value=0, max_value=10000, places=3),
        threshold=st.decimals(min_value=0, max_value=10000, places=3),
    )
    def test_low_stock_iff_quantity_at_or_below_threshold(self, quantity, threshold):
        item = SimpleNamespace(quantity=quantity, min_threshold=threshold)
        assert is_low_stock(item) == (quantity <= threshold)

    @given(quantity=st.decimals(min_value=0, max_value=10000, places=3))
    def test_no_threshold_is_never_low(self, quantity):
        assert not is_low_stock(SimpleNamespace(quantity=quantity, min_threshold=None))


class TestBudgetProperties:
    @given(
        today=st.dates(min_value=date(2000, 1, 1), max_value=date(2100, 12, 31)),
        period=st.sampled_from(["weekly", "monthly", "quarterly", "yearly"]),
    )
    def test_period_contains_today(self, today, period):
        start, end = period_bounds(period, today)
        assert start <= today <= end

    @given(today=st.dates(min_value=date(2000, 1, 1), max_value=date(2100, 12, 31)))
    def test_week_runs_monday_to_sunday(self, today):
        start, end = period_bounds("weekly", today)
        assert start.weekday() == 0
        assert (end - start).days == 6

    @given(spent=amounts, budgeted=amounts)
    def test_percent_is_non_negative(self, spent, budgeted):
        assert percent_of(spent, budgeted) >= 0


class TestLedgerProperties:
    @given(
        account_type=st.sampled_from(["asset", "liability", "equity", "revenue", "expense"]),
        balance=st.decimals(
            min_value=Decimal("-99999.99"), max_value=Decimal("99999.99"), places=2
        ),
    )
    def test_balance_lands_in_exactly_one_column(self, account_type, balance):
        debit, credit = split_balance(account_type, balance)
        assert debit >= 0 and credit >= 0
        assert debit == 0 or credit == 0
        assert debit + credit == abs(balance)
