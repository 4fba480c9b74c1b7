import pytest


PET = {"name": "Rex", "sex": "male", "type": "dog", "date_of_birth": "2020-04-01T00:00:00Z"}


@pytest.fixture
def pet(client, auth_headers):
    resp = client.post("/api/v1/pets/", json=PET, headers=auth_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestPetAPI:
    def test_create_and_list(self, client, auth_headers, pet):
        assert pet["name"] == "Rex"
        assert pet["type"] == "dog"

        resp = client.get("/api/v1/pets/", headers=auth_headers)
        assert resp.status_code == 200
        assert [p["pet_id"] for p in resp.json()] == [pet["pet_id"]]

    def test_invalid_pet_type(self, client, auth_headers):
        resp = client.post("/api/v1/pets/", json={**PET, "type": "dragon"}, headers=auth_headers)
        assert resp.status_code == 422

    def test_update_pet(self, client, auth_headers, pet):
        resp = client.put(f"/api/v1/pets/{pet['pet_id']}", json={"name": "Max"}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["name"] == "Max"
        assert resp.json()["sex"] == "male"

    def test_other_users_cannot_see_pet(self, client, other_headers, pet):
        resp = client.get(f"/api/v1/pets/{pet['pet_id']}", headers=other_headers)
        assert resp.status_code == 404

        listing = client.get("/api/v1/pets/", headers=other_headers)
        assert listing.json() == []

    def test_delete_pet(self, client, auth_headers, pet):
        resp = client.delete(f"/api/v1/pets/{pet['pet_id']}", headers=auth_headers)
        assert resp.status_code == 204

        resp = client.get(f"/api/v1/pets/{pet['pet_id']}", headers=auth_headers)
        assert resp.status_code == 404
