"""
Tests for the ledger CRUD endpoints and request validation responses.
"""

import pytest


class TestValidationResponse:
    def test_body_shape(self, client, auth_headers):
        response = client.post(
            "/api/transactions",
            json={"type": "gift", "category": "Feed", "date": "2024-01-01"},
            headers=auth_headers,
        )
        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Validation error"
        fields = {e["field"] for e in data["errors"]}
        assert {"type", "amount"} <= fields
        assert all(e["message"] and e["type"] for e in data["errors"])

    def test_malformed_json(self, client, auth_headers):
        response = client.post(
            "/api/transactions",
            content=b"{not json",
            headers={**auth_headers, "Content-Type": "application/json"},
        )
        assert response.status_code == 400

    @pytest.mark.parametrize("amount", ["abc", "1.234", "12345678901.00"])
    def test_bad_transaction_amounts(self, client, auth_headers, amount):
        response = client.post(
            "/api/transactions",
            json={"type": "expense", "category": "Feed", "amount": amount, "date": "2024-01-01"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_text_length_limits(self, client, auth_headers):
        body = {"type": "expense", "amount": 1, "date": "2024-01-01"}
        too_long = client.post(
            "/api/transactions", json={**body, "category": "x" * 256}, headers=auth_headers
        )
        assert too_long.status_code == 400
        assert too_long.json()["errors"][0]["field"] == "category"

        at_limit = client.post(
            "/api/transactions",
            json={**body, "category": "x" * 255, "description": "y" * 5000},
            headers=auth_headers,
        )
        assert at_limit.status_code == 201

    def test_negative_budget_rejected(self, client, auth_headers):
        response = client.post(
            "/api/budgets",
            json={"name": "Feed", "category": "Feed", "budgeted_amount": -5,
                  "start_date": "2024-01-01", "end_date": "2024-12-31"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_threshold_above_100_rejected(self, client, auth_headers):
        response = client.post(
            "/api/budgets",
            json={"name": "Feed", "category": "Feed", "budgeted_amount": 5, "alert_threshold": 101,
                  "start_date": "2024-01-01", "end_date": "2024-12-31"},
            headers=auth_headers,
        )
        assert response.status_code == 400


class TestTransactions:
    def test_crud(self, client, auth_headers):
        response = client.post(
            "/api/transactions",
            json={"type": "expense", "category": "Feed", "amount": "250.50", "date": "2024-01-15",
                  "payment_method": "Check", "tags": ["hay", "winter"]},
            headers=auth_headers,
        )
        assert response.status_code == 201
        tx = response.json()
        assert tx["amount"] == 250.5
        assert tx["tags"] == ["hay", "winter"]

        url = f"/api/transactions/{tx['id']}"
        response = client.patch(url, json={"description": "Premium hay"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["amount"] == 250.5
        assert response.json()["description"] == "Premium hay"

        assert client.delete(url, headers=auth_headers).status_code == 204
        assert client.get(url, headers=auth_headers).status_code == 404

    def test_list_by_date_desc(self, client, auth_headers):
        for day in ("2024-01-15", "2024-03-01", "2024-02-01"):
            client.post(
                "/api/transactions",
                json={"type": "income", "category": "Sales", "amount": 1, "date": day},
                headers=auth_headers,
            )
        response = client.get("/api/transactions", headers=auth_headers)
        assert [t["date"] for t in response.json()] == ["2024-03-01", "2024-02-01", "2024-01-15"]

    def test_amount_cannot_be_nulled(self, client, auth_headers):
        tx = client.post(
            "/api/transactions",
            json={"type": "income", "category": "Sales", "amount": 1, "date": "2024-01-01"},
            headers=auth_headers,
        ).json()
        response = client.patch(f"/api/transactions/{tx['id']}", json={"amount": None}, headers=auth_headers)
        assert response.status_code == 400


class TestBudgets:
    def test_update_cannot_invert_dates(self, client, auth_headers):
        budget = client.post(
            "/api/budgets",
            json={"name": "Fuel", "category": "Fuel", "budgeted_amount": 300,
                  "start_date": "2024-01-01", "end_date": "2024-12-31"},
            headers=auth_headers,
        ).json()
        assert budget["alert_threshold"] == 80
        assert budget["period"] == "monthly"

        response = client.patch(
            f"/api/budgets/{budget['id']}", json={"end_date": "2023-06-30"}, headers=auth_headers
        )
        assert response.status_code == 400


class TestAccountsAndJournal:
    def test_accounts_listed_newest_first(self, client, auth_headers):
        for number in ("1000", "4000", "2000"):
            response = client.post(
                "/api/accounts",
                json={"account_number": number, "name": f"Acct {number}", "type": "asset"},
                headers=auth_headers,
            )
            assert response.status_code == 201
        response = client.get("/api/accounts", headers=auth_headers)
        assert [a["account_number"] for a in response.json()] == ["2000", "4000", "1000"]
        assert response.json()[0]["balance"] == 0.0

    def test_unknown_account_type(self, client, auth_headers):
        response = client.post(
            "/api/accounts",
            json={"account_number": "9000", "name": "Odd", "type": "contra"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_journal_entry_crud(self, client, auth_headers):
        response = client.post(
            "/api/journal-entries",
            json={"entry_number": "JE-001", "date": "2024-01-31", "description": "Month end",
                  "total_debit": "1500.00", "total_credit": "1500.00"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        entry = response.json()
        assert entry["status"] == "draft"

        response = client.patch(
            f"/api/journal-entries/{entry['id']}", json={"status": "posted"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "posted"

    def test_unbalanced_entry_is_recorded(self, client, auth_headers):
        response = client.post(
            "/api/journal-entries",
            json={"entry_number": "JE-002", "date": "2024-02-01", "description": "Draft",
                  "total_debit": "10.00", "total_credit": "9.00"},
            headers=auth_headers,
        )
        assert response.status_code == 201
