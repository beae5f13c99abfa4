"""
Tests for bearer authentication, identity sync, profile, notification
settings and the admin endpoints.
"""

import jwt
import pytest

from ranch_shared.security.auth import extract_user_id, sign_jwt
from tests.conftest import ADMIN_ID, OWNER_ID, bearer


class TestBearerAuthentication:
    def test_missing_header(self, client):
        response = client.get("/api/animals")
        assert response.status_code == 401
        assert response.json()["detail"] == "Missing Authorization header"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_wrong_scheme(self, client):
        response = client.get("/api/animals", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_bad_signature(self, client):
        token = jwt.encode({"sub": OWNER_ID, "exp": 9999999999}, "another-secret-entirely-0123456789", algorithm="HS256")
        response = client.get("/api/animals", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    def test_expired_token(self, client):
        token = sign_jwt({"sub": OWNER_ID}, ttl_seconds=-60)
        response = client.get("/api/animals", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_missing_subject(self, client):
        token = sign_jwt({"email": "nobody@ranch.test"})
        response = client.get("/api/animals", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    @pytest.mark.parametrize(
        "claims, expected",
        [
            ({"sub": "abc"}, "abc"),
            ({"uid": 42}, "42"),
            ({"sub": "", "user_id": "fallback"}, "fallback"),
            ({}, None),
        ],
    )
    def test_extract_user_id(self, claims, expected):
        assert extract_user_id(claims) == expected


class TestIdentitySync:
    def test_sync_creates_user_from_claims(self, client):
        headers = bearer(OWNER_ID, email="owner@ranch.test", given_name="Ada")
        response = client.post("/api/auth/sync", headers=headers)
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == OWNER_ID
        assert data["email"] == "owner@ranch.test"
        assert data["first_name"] == "Ada"
        assert data["role"] == "user"
        assert data["last_login"] is not None

    def test_claims_win_over_body(self, client, auth_headers):
        response = client.post(
            "/api/auth/sync",
            json={"email": "body@example.com", "last_name": "Lovelace"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["email"] == "owner@ranch.test"
        assert response.json()["last_name"] == "Lovelace"

    def test_body_fills_missing_claims(self, client):
        response = client.post(
            "/api/auth/sync",
            json={"email": "rancher@example.com", "first_name": "Ada"},
            headers=bearer(OWNER_ID),
        )
        assert response.status_code == 200
        assert response.json()["email"] == "rancher@example.com"
        assert response.json()["first_name"] == "Ada"

    def test_sync_is_repeatable(self, client, auth_headers):
        assert client.post("/api/auth/sync", headers=auth_headers).status_code == 200
        assert client.post("/api/auth/sync", headers=auth_headers).status_code == 200

    def test_current_user_before_sync_is_404(self, client, auth_headers):
        assert client.get("/api/auth/user", headers=auth_headers).status_code == 404

    def test_current_user(self, client, auth_headers):
        client.post("/api/auth/sync", headers=auth_headers)
        response = client.get("/api/auth/user", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["id"] == OWNER_ID


class TestProfile:
    def test_update_profile(self, client, auth_headers):
        client.post("/api/auth/sync", headers=auth_headers)
        response = client.patch(
            "/api/profile",
            json={"phone": "+1 555 0100", "bio": "Third generation rancher"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["phone"] == "+1 555 0100"
        assert response.json()["email"] == "owner@ranch.test"

    def test_role_cannot_be_changed_through_profile(self, client, auth_headers):
        client.post("/api/auth/sync", headers=auth_headers)
        response = client.patch("/api/profile", json={"role": "admin"}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["role"] == "user"

    def test_invalid_email(self, client, auth_headers):
        client.post("/api/auth/sync", headers=auth_headers)
        response = client.patch("/api/profile", json={"email": "not-an-email"}, headers=auth_headers)
        assert response.status_code == 400


class TestNotificationSettings:
    def test_defaults(self, client, auth_headers):
        response = client.get("/api/notifications/settings", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == OWNER_ID
        assert data["email_notifications"] is True
        assert data["sms_notifications"] is False
        assert data["system_updates"] is False

    def test_partial_update(self, client, auth_headers):
        response = client.patch(
            "/api/notifications/settings",
            json={"sms_notifications": True, "weather_alerts": False},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["sms_notifications"] is True
        assert data["weather_alerts"] is False
        assert data["health_alerts"] is True

        again = client.get("/api/notifications/settings", headers=auth_headers).json()
        assert again["sms_notifications"] is True


class TestAdmin:
    def test_non_admin_forbidden(self, client, auth_headers):
        client.post("/api/auth/sync", headers=auth_headers)
        response = client.get("/api/admin/users", headers=auth_headers)
        assert response.status_code == 403

    def test_unknown_user_forbidden(self, client, auth_headers):
        assert client.get("/api/admin/stats", headers=auth_headers).status_code == 403

    def test_list_users(self, client, admin_headers, auth_headers):
        client.post("/api/auth/sync", headers=auth_headers)
        response = client.get("/api/admin/users", headers=admin_headers)
        assert response.status_code == 200
        assert {u["id"] for u in response.json()} == {ADMIN_ID, OWNER_ID}

    def test_create_user_and_duplicate(self, client, admin_headers):
        body = {"id": "new-user-0004", "email": "new@example.com", "role": "user"}
        response = client.post("/api/admin/users", json=body, headers=admin_headers)
        assert response.status_code == 201
        assert response.json()["is_active"] is True

        response = client.post("/api/admin/users", json=body, headers=admin_headers)
        assert response.status_code == 409

    def test_change_role(self, client, admin_headers, auth_headers):
        client.post("/api/auth/sync", headers=auth_headers)
        response = client.patch(
            f"/api/admin/users/{OWNER_ID}/role", json={"role": "admin"}, headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["role"] == "admin"

        # the promoted user now passes the admin check
        assert client.get("/api/admin/stats", headers=auth_headers).status_code == 200

    def test_change_role_unknown_user(self, client, admin_headers):
        response = client.patch(
            "/api/admin/users/missing/role", json={"role": "admin"}, headers=admin_headers
        )
        assert response.status_code == 404

    def test_invalid_role(self, client, admin_headers):
        response = client.patch(
            f"/api/admin/users/{ADMIN_ID}/role", json={"role": "superuser"}, headers=admin_headers
        )
        assert response.status_code == 400

    def test_system_stats(self, client, admin_headers, auth_headers, animal_payload):
        client.post("/api/animals", json=animal_payload, headers=auth_headers)
        response = client.get("/api/admin/stats", headers=admin_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["total_users"] == 1
        assert data["admin_users"] == 1
        assert data["total_animals"] == 1
        assert data["total_transactions"] == 0
