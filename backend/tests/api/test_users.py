"""
Tests for the profile, user search and verification-status endpoints.
"""

from postgrest.exceptions import APIError


class TestProfiles:
    def test_me(self, client, verified_user, auth_headers):
        response = client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == verified_user.id
        assert "password" not in data

    def test_other_user(self, client, users, verified_user, auth_headers):
        users.add(id="bob-id", display="Bob", email="bob@example.com", password="$2b$10$hash")

        response = client.get("/api/users/bob-id", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["display"] == "Bob"
        assert "password" not in response.json()

    def test_unknown_user(self, client, verified_user, auth_headers):
        response = client.get("/api/users/nobody", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_malformed_user_id(self, client, users, verified_user, auth_headers):
        """A database error on the lookup, such as a non-UUID id, is a 404."""
        users.lookup_errors["abc"] = APIError(
            {"message": 'invalid input syntax for type uuid: "abc"', "code": "22P02"}
        )

        response = client.get("/api/users/abc", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"


class TestVerificationStatus:
    def test_unverified_user_can_check_status(self, client, users, test_user_id, auth_headers):
        users.add(id=test_user_id, verified=False)

        response = client.get("/api/account/verify", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"userId": test_user_id, "verified": False}
        assert response.headers["Authorization"].startswith("Bearer ")

    def test_verified_user(self, client, verified_user, auth_headers):
        response = client.get("/api/account/verify", headers=auth_headers)
        assert response.json() == {"userId": verified_user.id, "verified": True}

    def test_requires_credential(self, client):
        response = client.get("/api/account/verify")
        assert response.status_code == 401

    def test_web_surface(self, client, users, test_user_id, auth_token):
        users.add(id=test_user_id, verified=False)
        client.cookies.set("token", auth_token)

        response = client.get("/web/account/verify")

        assert response.status_code == 200
        assert response.json()["verified"] is False
        assert response.cookies.get("token")


class TestUserSearch:
    def test_search_by_display_name(self, client, users, verified_user, auth_headers):
        users.add(id="bob-id", display="Bob", email="bob@example.com", password="$2b$10$hash")
        users.add(id="bobby-id", display="Bobby", email="bobby@example.com")

        response = client.get("/api/users/", params={"name": "bob"}, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["totalRecords"] == 2
        assert data["filteredRecords"] == 2
        assert {u["id"] for u in data["users"]} == {"bob-id", "bobby-id"}
        assert all("password" not in u for u in data["users"])

    def test_paging(self, client, users, verified_user, auth_headers):
        for n in range(3):
            users.add(id=f"cook-{n}", display=f"Cook {n}", email=f"cook{n}@example.com")

        response = client.get(
            "/api/users/", params={"name": "cook", "page": 2, "limit": 2}, headers=auth_headers
        )

        assert response.json()["totalRecords"] == 3
        assert response.json()["filteredRecords"] == 1

    def test_requires_credential(self, client, users):
        response = client.get("/api/users/")
        assert response.status_code == 401
        assert "find" not in users.calls

    def test_query_failure(self, client, users, verified_user, auth_headers):
        users.error = APIError({"message": "bad filter", "code": "42703"})

        response = client.get("/api/users/", headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["error"] == "Failed to execute query"
