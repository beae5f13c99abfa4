"""
Tests for livestock endpoints: animals, health records, breeding records.
"""

from datetime import date, timedelta

from ranch_api.services.livestock import BreedingRecordService


def create_animal(client, headers, **overrides):
    body = {"tag_id": "COW001", "species": "Cattle", "gender": "female", **overrides}
    response = client.post("/api/animals", json=body, headers=headers)
    assert response.status_code == 201, response.json()
    return response.json()


class TestAnimalCrud:
    def test_create_returns_persisted_animal(self, client, auth_headers, animal_payload):
        response = client.post("/api/animals", json=animal_payload, headers=auth_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["user_id"] == "owner-0001"
        assert data["status"] == "active"
        assert data["created_at"]

    def test_list_newest_first(self, client, auth_headers):
        first = create_animal(client, auth_headers, tag_id="A1")
        second = create_animal(client, auth_headers, tag_id="A2")

        response = client.get("/api/animals", headers=auth_headers)
        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [second["id"], first["id"]]

    def test_get_by_id(self, client, auth_headers):
        animal = create_animal(client, auth_headers, name="Bessie")
        response = client.get(f"/api/animals/{animal['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Bessie"

    def test_get_missing_is_404(self, client, auth_headers):
        response = client.get("/api/animals/9999", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["detail"] == "Animal with ID 9999 not found"

    def test_partial_update_keeps_other_fields(self, client, auth_headers):
        animal = create_animal(client, auth_headers, name="Bessie", breed="Holstein")

        response = client.patch(
            f"/api/animals/{animal['id']}",
            json={"location": "North Pasture"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()
        assert data["location"] == "North Pasture"
        assert data["name"] == "Bessie"
        assert data["breed"] == "Holstein"
        assert data["tag_id"] == "COW001"

    def test_put_is_partial_too(self, client, auth_headers):
        animal = create_animal(client, auth_headers, name="Bessie")
        response = client.put(
            f"/api/animals/{animal['id']}", json={"status": "sold"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["status"] == "sold"
        assert response.json()["name"] == "Bessie"

    def test_update_missing_is_404(self, client, auth_headers):
        response = client.patch("/api/animals/9999", json={"name": "x"}, headers=auth_headers)
        assert response.status_code == 404

    def test_null_required_field_rejected(self, client, auth_headers):
        animal = create_animal(client, auth_headers)
        response = client.patch(
            f"/api/animals/{animal['id']}", json={"species": None}, headers=auth_headers
        )
        assert response.status_code == 400

    def test_delete_is_idempotent(self, client, auth_headers):
        animal = create_animal(client, auth_headers)

        first = client.delete(f"/api/animals/{animal['id']}", headers=auth_headers)
        assert first.status_code == 204
        assert first.content == b""

        second = client.delete(f"/api/animals/{animal['id']}", headers=auth_headers)
        assert second.status_code == 204

        assert client.get(f"/api/animals/{animal['id']}", headers=auth_headers).status_code == 404

    def test_duplicate_tag_is_409(self, client, auth_headers):
        create_animal(client, auth_headers, tag_id="DUP1")
        response = client.post(
            "/api/animals",
            json={"tag_id": "DUP1", "species": "Sheep", "gender": "male"},
            headers=auth_headers,
        )
        assert response.status_code == 409

    def test_same_tag_allowed_for_different_users(self, client, auth_headers, other_auth_headers):
        create_animal(client, auth_headers, tag_id="SHARED")
        create_animal(client, other_auth_headers, tag_id="SHARED")

    def test_weight_precision(self, client, auth_headers):
        animal = create_animal(client, auth_headers, current_weight="123456.78")
        assert animal["current_weight"] == 123456.78

        response = client.post(
            "/api/animals",
            json={"tag_id": "HEAVY", "species": "Cattle", "gender": "male", "current_weight": "1234567.89"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_parent_must_be_owned(self, client, auth_headers, other_auth_headers):
        foreign = create_animal(client, other_auth_headers, tag_id="F1")
        response = client.post(
            "/api/animals",
            json={"tag_id": "CALF", "species": "Cattle", "gender": "male", "mother_id": foreign["id"]},
            headers=auth_headers,
        )
        assert response.status_code == 400


class TestAnimalIsolation:
    def test_other_user_cannot_see_list(self, client, auth_headers, other_auth_headers):
        create_animal(client, auth_headers)
        response = client.get("/api/animals", headers=other_auth_headers)
        assert response.status_code == 200
        assert response.json() == []

    def test_other_user_gets_404(self, client, auth_headers, other_auth_headers):
        animal = create_animal(client, auth_headers)
        url = f"/api/animals/{animal['id']}"

        assert client.get(url, headers=other_auth_headers).status_code == 404
        assert client.patch(url, json={"name": "Stolen"}, headers=other_auth_headers).status_code == 404

    def test_other_user_delete_changes_nothing(self, client, auth_headers, other_auth_headers):
        animal = create_animal(client, auth_headers, name="Bessie")
        url = f"/api/animals/{animal['id']}"

        assert client.delete(url, headers=other_auth_headers).status_code == 204
        response = client.get(url, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["name"] == "Bessie"


class TestHealthRecords:
    def test_create_and_list_for_animal(self, client, auth_headers):
        animal = create_animal(client, auth_headers)
        for day in ("2024-01-10", "2024-03-05"):
            response = client.post(
                "/api/health-records",
                json={"animal_id": animal["id"], "type": "checkup", "date": day, "cost": 45},
                headers=auth_headers,
            )
            assert response.status_code == 201

        response = client.get(f"/api/animals/{animal['id']}/health-records", headers=auth_headers)
        assert response.status_code == 200
        assert [r["date"] for r in response.json()] == ["2024-03-05", "2024-01-10"]
        assert response.json()[0]["cost"] == 45.0

    def test_get_by_id_and_list(self, client, auth_headers, other_auth_headers):
        animal = create_animal(client, auth_headers)
        record = client.post(
            "/api/health-records",
            json={"animal_id": animal["id"], "type": "vaccination", "date": "2024-02-01",
                  "next_due_date": "2025-02-01"},
            headers=auth_headers,
        ).json()
        url = f"/api/health-records/{record['id']}"

        response = client.get(url, headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["next_due_date"] == "2025-02-01"

        assert client.get(url, headers=other_auth_headers).status_code == 404
        assert client.get("/api/health-records/9999", headers=auth_headers).status_code == 404

        assert [r["id"] for r in client.get("/api/health-records", headers=auth_headers).json()] == [record["id"]]
        assert client.get("/api/health-records", headers=other_auth_headers).json() == []

    def test_create_for_foreign_animal_is_404(self, client, auth_headers, other_auth_headers):
        foreign = create_animal(client, other_auth_headers)
        response = client.post(
            "/api/health-records",
            json={"animal_id": foreign["id"], "type": "vaccination", "date": "2024-01-10"},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_list_for_foreign_animal_is_404(self, client, auth_headers, other_auth_headers):
        foreign = create_animal(client, other_auth_headers)
        response = client.get(f"/api/animals/{foreign['id']}/health-records", headers=auth_headers)
        assert response.status_code == 404

    def test_unknown_type_rejected(self, client, auth_headers):
        animal = create_animal(client, auth_headers)
        response = client.post(
            "/api/health-records",
            json={"animal_id": animal["id"], "type": "surgery", "date": "2024-01-10"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_update_and_delete(self, client, auth_headers):
        animal = create_animal(client, auth_headers)
        record = client.post(
            "/api/health-records",
            json={"animal_id": animal["id"], "type": "treatment", "date": "2024-01-10"},
            headers=auth_headers,
        ).json()

        response = client.patch(
            f"/api/health-records/{record['id']}",
            json={"veterinarian": "Dr. Sarah Johnson"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["veterinarian"] == "Dr. Sarah Johnson"

        assert client.delete(f"/api/health-records/{record['id']}", headers=auth_headers).status_code == 204


class TestBreedingRecords:
    def test_status_derived_at_read_time(self, client, auth_headers):
        cow = create_animal(client, auth_headers, tag_id="COW1")
        bull = create_animal(client, auth_headers, tag_id="BULL1", gender="male")
        future = (date.today() + timedelta(days=60)).isoformat()
        past = (date.today() - timedelta(days=1)).isoformat()

        pregnant = client.post(
            "/api/breeding-records",
            json={"mother_id": cow["id"], "father_id": bull["id"],
                  "breeding_date": "2024-01-20", "expected_birth_date": future},
            headers=auth_headers,
        )
        assert pregnant.status_code == 201
        assert pregnant.json()["status"] == "pregnant"

        overdue = client.post(
            "/api/breeding-records",
            json={"mother_id": cow["id"], "breeding_date": "2024-01-21", "expected_birth_date": past},
            headers=auth_headers,
        ).json()
        assert overdue["status"] == "overdue"

        born = client.patch(
            f"/api/breeding-records/{overdue['id']}",
            json={"actual_birth_date": date.today().isoformat()},
            headers=auth_headers,
        )
        assert born.status_code == 200
        assert born.json()["status"] == "born"

    def test_mother_must_be_owned(self, client, auth_headers, other_auth_headers):
        foreign = create_animal(client, other_auth_headers)
        response = client.post(
            "/api/breeding-records",
            json={"mother_id": foreign["id"], "breeding_date": "2024-01-20"},
            headers=auth_headers,
        )
        assert response.status_code == 404

    def test_ordered_by_breeding_date(self, client, auth_headers):
        cow = create_animal(client, auth_headers)
        for day in ("2024-01-01", "2024-06-01", "2024-03-01"):
            client.post(
                "/api/breeding-records",
                json={"mother_id": cow["id"], "breeding_date": day},
                headers=auth_headers,
            )
        response = client.get("/api/breeding-records", headers=auth_headers)
        assert [r["breeding_date"] for r in response.json()] == ["2024-06-01", "2024-03-01", "2024-01-01"]

    def test_status_uses_injected_today(self, db_session):
        from ranch_api.models import Animal

        cow = Animal(user_id="owner-0001", tag_id="C", species="Cattle", gender="female")
        db_session.add(cow)
        db_session.commit()

        service = BreedingRecordService(db_session, today=date(2024, 10, 16))
        record = service.create(
            {"mother_id": cow.id, "breeding_date": date(2024, 1, 20),
             "expected_birth_date": date(2024, 10, 15)},
            "owner-0001",
        )
        assert record.status == "overdue"

        on_time = BreedingRecordService(db_session, today=date(2024, 10, 15))
        assert on_time.get_by_id(record.id, "owner-0001").status == "pregnant"
