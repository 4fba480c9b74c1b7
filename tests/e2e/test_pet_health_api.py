import pytest


@pytest.fixture
def pet_id(client, auth_headers):
    resp = client.post(
        "/api/v1/pets/", json={"name": "Tom", "sex": "male", "type": "cat"}, headers=auth_headers
    )
    return resp.json()["pet_id"]


class TestPetHealthAPI:
    def test_record_and_list(self, client, auth_headers, pet_id):
        payload = {"size": 30.5, "weight": 4.2, "date": "2024-05-01T10:00:00Z"}
        resp = client.post(f"/api/v1/pet-health/pet/{pet_id}", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.text
        body = resp.json()
        assert body["pet"]["name"] == "Tom"
        assert body["health_info"]["weight"] == 4.2

        for_pet = client.get(f"/api/v1/pet-health/pet/{pet_id}", headers=auth_headers)
        assert for_pet.status_code == 200
        assert len(for_pet.json()) == 1

        everything = client.get("/api/v1/pet-health/", headers=auth_headers)
        assert [r["pet_id"] for r in everything.json()] == [pet_id]

    def test_update_and_delete(self, client, auth_headers, pet_id):
        payload = {"size": 30.5, "weight": 4.2, "date": "2024-05-01T10:00:00Z"}
        client.post(f"/api/v1/pet-health/pet/{pet_id}", json=payload, headers=auth_headers)
        health_id = client.get(f"/api/v1/pet-health/pet/{pet_id}", headers=auth_headers).json()[0]["health_id"]

        resp = client.put(f"/api/v1/pet-health/{health_id}", json={"weight": 4.8}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["weight"] == 4.8
        assert resp.json()["size"] == 30.5

        assert client.delete(f"/api/v1/pet-health/{health_id}", headers=auth_headers).status_code == 204
        assert client.get(f"/api/v1/pet-health/pet/{pet_id}", headers=auth_headers).json() == []

    def test_negative_weight_rejected(self, client, auth_headers, pet_id):
        payload = {"size": 1, "weight": -1, "date": "2024-05-01T10:00:00Z"}
        resp = client.post(f"/api/v1/pet-health/pet/{pet_id}", json=payload, headers=auth_headers)
        assert resp.status_code == 422

    def test_foreign_pet(self, client, other_headers, pet_id):
        payload = {"size": 1, "weight": 1, "date": "2024-05-01T10:00:00Z"}
        resp = client.post(f"/api/v1/pet-health/pet/{pet_id}", json=payload, headers=other_headers)
        assert resp.status_code == 404
