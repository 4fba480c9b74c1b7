class TestUserAPI:
    """
    Class-based tests for user-related endpoints.
    """

    def test_register_and_me(self, client):
        resp = client.post("/api/v1/users/", json={"email": "New.User@Example.com", "username": "new"})
        assert resp.status_code == 201, resp.text
        data = resp.json()
        assert data["email"] == "new.user@example.com"
        assert "user_id" in data

        me = client.get("/api/v1/users/me", headers={"X-User-Email": "new.user@example.com"})
        assert me.status_code == 200
        assert me.json()["user_id"] == data["user_id"]

    def test_register_duplicate_email(self, client, owner):
        resp = client.post("/api/v1/users/", json={"email": owner.email})
        assert resp.status_code == 400
        assert resp.json()["detail"]["error_code"] == "USER_ALREADY_EXISTS"

    def test_register_invalid_email(self, client):
        resp = client.post("/api/v1/users/", json={"email": "not-an-email"})
        assert resp.status_code == 422

    def test_missing_identity_header(self, client):
        resp = client.get("/api/v1/users/me")
        assert resp.status_code == 401
        assert resp.json()["detail"]["error_code"] == "USER_NOT_IDENTIFIED"

    def test_unknown_identity(self, client):
        resp = client.get("/api/v1/users/me", headers={"X-User-Email": "ghost@example.com"})
        assert resp.status_code == 401
