"""
Tests for budget status, trial balance and the dashboard statistics.
"""

from datetime import date
from decimal import Decimal

import pytest

from ranch_api.models import Budget, Equipment, HealthRecord, InventoryItem, Animal
from ranch_api.services.dashboard import DashboardService, month_bounds
from ranch_api.services.finance import (
    AccountService,
    BudgetStatusService,
    TransactionService,
    TrialBalanceService,
)
from ranch_api.services.finance.budgets import budget_window, period_bounds
from tests.conftest import OTHER_ID, OWNER_ID


TODAY = date(2024, 5, 15)


def add_expense(db, category, amount, on, user_id=OWNER_ID):
    TransactionService(db).create(
        {"type": "expense", "category": category, "amount": Decimal(amount), "date": on},
        user_id,
    )


def add_budget(db, **overrides):
    values = dict(
        user_id=OWNER_ID,
        name="Feed budget",
        category="Feed",
        budgeted_amount=Decimal("1000.00"),
        period="monthly",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        alert_threshold=80,
        is_active=True,
    )
    values.update(overrides)
    budget = Budget(**values)
    db.add(budget)
    db.commit()
    return budget


class TestPeriodBounds:
    @pytest.mark.parametrize(
        "period, expected",
        [
            ("weekly", (date(2024, 5, 13), date(2024, 5, 19))),
            ("monthly", (date(2024, 5, 1), date(2024, 5, 31))),
            ("quarterly", (date(2024, 4, 1), date(2024, 6, 30))),
            ("yearly", (date(2024, 1, 1), date(2024, 12, 31))),
        ],
    )
    def test_calendar_periods(self, period, expected):
        assert period_bounds(period, TODAY) == expected

    def test_february_leap_year(self):
        assert period_bounds("monthly", date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_window_clipped_to_budget_dates(self):
        budget = Budget(period="monthly", start_date=date(2024, 5, 10), end_date=date(2024, 5, 20))
        assert budget_window(budget, TODAY) == (date(2024, 5, 10), date(2024, 5, 20))

    def test_window_none_outside_budget(self):
        budget = Budget(period="monthly", start_date=date(2023, 1, 1), end_date=date(2023, 12, 31))
        assert budget_window(budget, TODAY) is None


class TestBudgetStatus:
    def test_spend_in_window_and_category_only(self, db_session):
        add_budget(db_session)
        add_expense(db_session, "Feed", "300.00", date(2024, 5, 1))
        add_expense(db_session, "Feed", "200.00", date(2024, 5, 31))
        add_expense(db_session, "Feed", "999.00", date(2024, 4, 30))  # previous month
        add_expense(db_session, "Fuel", "999.00", date(2024, 5, 10))  # other category
        add_expense(db_session, "Feed", "999.00", date(2024, 5, 10), user_id=OTHER_ID)
        TransactionService(db_session).create(
            {"type": "income", "category": "Feed", "amount": Decimal("999.00"), "date": date(2024, 5, 10)},
            OWNER_ID,
        )

        [status] = BudgetStatusService(db_session).status(OWNER_ID, today=TODAY)
        assert status.spent == Decimal("500.00")
        assert status.remaining == Decimal("500.00")
        assert status.percent_used == Decimal("50.00")
        assert status.status == "ok"
        assert status.is_alert is False
        assert (status.window_start, status.window_end) == (date(2024, 5, 1), date(2024, 5, 31))

    def test_warning_at_threshold(self, db_session):
        add_budget(db_session)
        add_expense(db_session, "Feed", "800.00", date(2024, 5, 2))

        [status] = BudgetStatusService(db_session).status(OWNER_ID, today=TODAY)
        assert status.status == "warning"
        assert status.is_alert is True

    def test_over_budget(self, db_session):
        add_budget(db_session)
        add_expense(db_session, "Feed", "1000.01", date(2024, 5, 2))

        [status] = BudgetStatusService(db_session).status(OWNER_ID, today=TODAY)
        assert status.status == "over"
        assert status.remaining == Decimal("-0.01")

    def test_exactly_on_budget_is_not_over(self, db_session):
        add_budget(db_session, alert_threshold=100)
        add_expense(db_session, "Feed", "1000.00", date(2024, 5, 2))

        [status] = BudgetStatusService(db_session).status(OWNER_ID, today=TODAY)
        assert status.status == "warning"

    def test_empty_window_spends_nothing(self, db_session):
        add_budget(db_session, start_date=date(2023, 1, 1), end_date=date(2023, 12, 31))
        add_expense(db_session, "Feed", "500.00", date(2024, 5, 2))

        [status] = BudgetStatusService(db_session).status(OWNER_ID, today=TODAY)
        assert status.spent == Decimal("0.00")
        assert status.window_start is None

    def test_inactive_and_period_filter(self, db_session):
        add_budget(db_session, name="A monthly")
        add_budget(db_session, name="B yearly", period="yearly")
        add_budget(db_session, name="C off", is_active=False)

        service = BudgetStatusService(db_session)
        assert [s.name for s in service.status(OWNER_ID, today=TODAY)] == ["A monthly", "B yearly"]
        assert [s.name for s in service.status(OWNER_ID, period="yearly", today=TODAY)] == ["B yearly"]

    def test_endpoint(self, client, auth_headers):
        response = client.post(
            "/api/budgets",
            json={"name": "Feed", "category": "Feed", "budgeted_amount": 100,
                  "start_date": "2000-01-01", "end_date": "2100-12-31"},
            headers=auth_headers,
        )
        assert response.status_code == 201

        response = client.get("/api/budget-status", params={"period": "monthly"}, headers=auth_headers)
        assert response.status_code == 200
        [status] = response.json()
        assert status["budgeted_amount"] == 100.0
        assert status["spent"] == 0.0
        assert status["status"] == "ok"

    def test_unknown_period_is_400(self, client, auth_headers):
        response = client.get("/api/budget-status", params={"period": "daily"}, headers=auth_headers)
        assert response.status_code == 400

    def test_end_before_start_rejected(self, client, auth_headers):
        response = client.post(
            "/api/budgets",
            json={"name": "Feed", "category": "Feed", "budgeted_amount": 100,
                  "start_date": "2024-12-31", "end_date": "2024-01-01"},
            headers=auth_headers,
        )
        assert response.status_code == 400


class TestTrialBalance:
    def add_account(self, db, number, type, balance, **extra):
        AccountService(db).create(
            {"account_number": number, "name": f"Account {number}", "type": type,
             "balance": Decimal(balance), **extra},
            OWNER_ID,
        )

    def test_balanced_ledger(self, db_session):
        self.add_account(db_session, "1000", "asset", "5000.00")
        self.add_account(db_session, "2000", "liability", "2000.00")
        self.add_account(db_session, "3000", "equity", "2500.00")
        self.add_account(db_session, "4000", "revenue", "1500.00")
        self.add_account(db_session, "5000", "expense", "1000.00")

        report = TrialBalanceService(db_session).trial_balance(OWNER_ID)
        assert [line.account_number for line in report.accounts] == ["1000", "2000", "3000", "4000", "5000"]
        assert report.total_debit == Decimal("6000.00")
        assert report.total_credit == Decimal("6000.00")
        assert report.is_balanced

    def test_negative_balance_flips_side(self, db_session):
        self.add_account(db_session, "1100", "asset", "-250.00")
        [line] = TrialBalanceService(db_session).trial_balance(OWNER_ID).accounts
        assert (line.debit, line.credit) == (Decimal("0.00"), Decimal("250.00"))

    def test_inactive_accounts_excluded(self, db_session):
        self.add_account(db_session, "1000", "asset", "100.00")
        self.add_account(db_session, "1001", "asset", "900.00", is_active=False)

        report = TrialBalanceService(db_session).trial_balance(OWNER_ID)
        assert report.total_debit == Decimal("100.00")
        assert not report.is_balanced

    def test_endpoint(self, client, auth_headers):
        for number, type in (("1000", "asset"), ("3000", "equity")):
            response = client.post(
                "/api/accounts",
                json={"account_number": number, "name": number, "type": type, "balance": "750.25"},
                headers=auth_headers,
            )
            assert response.status_code == 201

        response = client.get("/api/trial-balance", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["total_debit"] == 750.25
        assert data["total_credit"] == 750.25
        assert data["is_balanced"] is True
        assert [a["account_number"] for a in data["accounts"]] == ["1000", "3000"]


class TestDashboard:
    def test_month_bounds(self):
        assert month_bounds(date(2023, 2, 14)) == (date(2023, 2, 1), date(2023, 2, 28))

    def test_stats(self, db_session):
        db_session.add_all([
            Animal(user_id=OWNER_ID, tag_id="A1", species="Cattle", gender="female"),
            Animal(user_id=OWNER_ID, tag_id="A2", species="Cattle", gender="male", status="sold"),
            Animal(user_id=OTHER_ID, tag_id="A3", species="Cattle", gender="male"),
            HealthRecord(user_id=OWNER_ID, animal_id=1, type="vaccination", date=date(2024, 1, 1),
                         next_due_date=TODAY),
            HealthRecord(user_id=OWNER_ID, animal_id=1, type="checkup", date=date(2024, 1, 1),
                         next_due_date=date(2024, 5, 16)),
            InventoryItem(user_id=OWNER_ID, name="Hay", category="Feed", unit="bales",
                          quantity=Decimal("5"), min_threshold=Decimal("5")),
            InventoryItem(user_id=OWNER_ID, name="Corn", category="Feed", unit="lbs",
                          quantity=Decimal("500"), min_threshold=Decimal("100")),
            Equipment(user_id=OWNER_ID, name="Baler", type="Balers", status="maintenance"),
            Equipment(user_id=OWNER_ID, name="Cutter", type="Mowers", status="repair"),
            Equipment(user_id=OWNER_ID, name="Tractor", type="Tractors", status="operational"),
        ])
        db_session.commit()

        TransactionService(db_session).create(
            {"type": "income", "category": "Sales", "amount": Decimal("1200.00"), "date": date(2024, 5, 31)},
            OWNER_ID,
        )
        add_expense(db_session, "Feed", "300.00", date(2024, 5, 1))
        add_expense(db_session, "Feed", "999.00", date(2024, 6, 1))

        stats = DashboardService(db_session).stats(OWNER_ID, today=TODAY)
        assert stats.total_animals == 1
        assert stats.health_alerts == 1
        assert stats.low_stock_items == 1
        assert stats.equipment_issues == 2
        assert stats.monthly_revenue == Decimal("1200.00")
        assert stats.monthly_expenses == Decimal("300.00")

    def test_endpoint_empty(self, client, auth_headers):
        response = client.get("/api/dashboard/stats", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "total_animals": 0,
            "health_alerts": 0,
            "low_stock_items": 0,
            "equipment_issues": 0,
            "monthly_revenue": 0.0,
            "monthly_expenses": 0.0,
        }
