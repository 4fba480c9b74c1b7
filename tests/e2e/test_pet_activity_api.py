import pytest


@pytest.fixture
def pet_id(client, auth_headers):
    resp = client.post(
        "/api/v1/pets/", json={"name": "Rex", "sex": "male", "type": "dog"}, headers=auth_headers
    )
    return resp.json()["pet_id"]


def add(client, headers, pet_id, activity, frequency, date):
    resp = client.post(
        f"/api/v1/activities/pet/{pet_id}",
        json={"activity": activity, "frequency": frequency, "date": date},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestPetActivityAPI:
    def test_list_pets_with_activities(self, client, auth_headers, pet_id):
        add(client, auth_headers, pet_id, "walk", 2, "2024-05-01T08:00:00Z")

        resp = client.get("/api/v1/activities/", headers=auth_headers)
        assert resp.status_code == 200
        pets = resp.json()
        assert pets[0]["pet_id"] == pet_id
        assert pets[0]["activities"][0]["activity"] == "walk"

    def test_count_frequency(self, client, auth_headers, pet_id):
        add(client, auth_headers, pet_id, "walk", 2, "2024-05-01T08:00:00Z")
        add(client, auth_headers, pet_id, "walk", 3, "2024-05-10T08:00:00Z")
        add(client, auth_headers, pet_id, "feed", 4, "2024-05-02T08:00:00Z")
        url = f"/api/v1/activities/pet/{pet_id}/count"

        total = client.get(url, headers=auth_headers).json()
        assert total["total_frequency"] == 9

        walks = client.get(url, params={"activity": "walk"}, headers=auth_headers).json()
        assert walks["total_frequency"] == 5

        window = client.get(
            url,
            params={"activity": "walk", "start_date": "2024-05-01T00:00:00Z", "end_date": "2024-05-05T00:00:00Z"},
            headers=auth_headers,
        ).json()
        assert window["total_frequency"] == 2

        half_open = client.get(
            url, params={"activity": "walk", "start_date": "2024-05-05T00:00:00Z"}, headers=auth_headers
        ).json()
        assert half_open["total_frequency"] == 5

    def test_count_with_no_activities(self, client, auth_headers, pet_id):
        resp = client.get(f"/api/v1/activities/pet/{pet_id}/count", headers=auth_headers)
        assert resp.json()["total_frequency"] == 0

    def test_inverted_window(self, client, auth_headers, pet_id):
        resp = client.get(
            f"/api/v1/activities/pet/{pet_id}/count",
            params={"start_date": "2024-05-05T00:00:00Z", "end_date": "2024-05-01T00:00:00Z"},
            headers=auth_headers,
        )
        assert resp.status_code == 400
        assert resp.json()["detail"]["error_code"] == "INVALID_RANGE"

    def test_update_and_delete(self, client, auth_headers, other_headers, pet_id):
        activity = add(client, auth_headers, pet_id, "walk", 1, "2024-05-01T08:00:00Z")
        activity_id = activity["activity_id"]

        assert client.put(
            f"/api/v1/activities/{activity_id}", json={"frequency": 5}, headers=other_headers
        ).status_code == 404

        resp = client.put(f"/api/v1/activities/{activity_id}", json={"frequency": 5}, headers=auth_headers)
        assert resp.json()["frequency"] == 5

        assert client.delete(f"/api/v1/activities/{activity_id}", headers=auth_headers).status_code == 204
        assert client.get(f"/api/v1/activities/pet/{pet_id}", headers=auth_headers).json() == []

    def test_update_with_null_label_keeps_value(self, client, auth_headers, pet_id):
        activity_id = add(client, auth_headers, pet_id, "walk", 1, "2024-05-01T08:00:00Z")["activity_id"]

        resp = client.put(
            f"/api/v1/activities/{activity_id}", json={"activity": None}, headers=auth_headers
        )

        assert resp.status_code == 200, resp.text
        assert resp.json()["activity"] == "walk"
