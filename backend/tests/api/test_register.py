"""
Tests for the registration endpoints.
"""

import pytest

from tests.fakes import FakeGoogleVerifier


@pytest.fixture
def valid_body() -> dict:
    return {"name": "Alice", "email": "alice@example.com", "password": "hunter2"}


class TestLocalRegistration:
    def test_register(self, client, users, hasher, valid_body):
        response = client.post("/api/register/", json=valid_body)

        assert response.status_code == 200
        data = response.json()
        assert data["display"] == "Alice"
        assert data["email"] == "alice@example.com"
        assert data["verified"] is False
        assert "password" not in data

        stored = users.rows[data["id"]]
        assert stored["password"] != "hunter2"
        assert hasher.compare("hunter2", stored["password"])

    def test_register_on_web_surface(self, client, users, valid_body):
        response = client.post("/web/register/", json=valid_body)
        assert response.status_code == 200
        assert len(users.rows) == 1

    @pytest.mark.parametrize(
        "missing,message",
        [
            ("name", "No name included in request"),
            ("password", "No password included in request"),
            ("email", "No email included in request"),
        ],
    )
    def test_missing_field_is_200_with_error(self, client, users, valid_body, missing, message):
        """Validation failures keep status 200 and carry the reason in the body."""
        del valid_body[missing]

        response = client.post("/api/register/", json=valid_body)

        assert response.status_code == 200
        assert response.json()["error"] == message
        assert users.rows == {}

    def test_empty_body(self, client):
        response = client.post("/api/register/")
        assert response.status_code == 200
        assert response.json()["error"] == "No body included in request"

    def test_name_too_long(self, client, valid_body):
        valid_body["name"] = "x" * 33
        response = client.post("/api/register/", json=valid_body)
        assert response.status_code == 200
        assert "between 1 and 32" in response.json()["error"]

    def test_invalid_email(self, client, valid_body):
        valid_body["email"] = "not-an-email"
        response = client.post("/api/register/", json=valid_body)
        assert response.status_code == 200
        assert response.json()["error"] == "Email address is invalid"

    def test_long_password(self, client, users, hasher, valid_body):
        valid_body["password"] = "p" * 80

        response = client.post("/api/register/", json=valid_body)

        assert response.status_code == 200
        stored = users.rows[response.json()["id"]]
        assert hasher.compare("p" * 80, stored["password"])

    def test_duplicate_email(self, client, users, valid_body):
        users.add(email="alice@example.com")

        response = client.post("/api/register/", json=valid_body)

        assert response.status_code == 422
        assert response.json() == {"error": "Duplicate email", "code": "EMAIL_TAKEN"}
        assert len(users.rows) == 1

    def test_no_credential_attached(self, client, valid_body):
        response = client.post("/api/register/", json=valid_body)
        assert "authorization" not in response.headers


class TestGoogleRegistration:
    def test_register(self, client, users, verifier):
        response = client.post("/api/register/google", json={"token": "google-id-token"})

        assert response.status_code == 200
        data = response.json()
        assert data["display"] == "Gina Google"
        assert data["email"] == "gina@example.com"
        assert data["avatar"] == "https://example.com/gina.png"
        assert data["google"] is True
        assert verifier.tokens == ["google-id-token"]
        assert users.rows[data["id"]].get("password") is None

    def test_missing_token(self, client, verifier):
        response = client.post("/api/register/google", json={})
        assert response.status_code == 200
        assert response.json()["error"] == "No OAuth token included in request"
        assert verifier.tokens == []

    def test_rejected_token(self, client, users):
        response = client.post("/api/register/google", json={"token": "bad-token"})
        assert response.status_code == 200
        assert response.json()["error"] == "Failed to validate authenticity of OAuth token"
        assert users.rows == {}

    def test_verifier_crash(self, client, verifier):
        verifier.error = RuntimeError("boom")
        response = client.post("/api/register/google", json={"token": "google-id-token"})
        assert response.status_code == 200
        assert response.json()["error"] == "Failed to validate authenticity of OAuth token"

    def test_incomplete_ticket(self, client, container, users):
        container._verifier = FakeGoogleVerifier(payload={"name": "Gina", "email": "gina@example.com"})

        response = client.post("/api/register/google", json={"token": "google-id-token"})

        assert response.status_code == 200
        assert response.json()["error"] == "Failed to extract data from Google Login Ticket"
        assert users.rows == {}

    def test_long_google_name_truncated(self, client, container):
        container._verifier = FakeGoogleVerifier(
            payload={"name": "G" * 50, "email": "gina@example.com", "picture": "p.png"}
        )
        response = client.post("/api/register/google", json={"token": "google-id-token"})
        assert response.json()["display"] == "G" * 32

    def test_already_registered(self, client, users):
        users.add(email="gina@example.com", google=True)

        response = client.post("/api/register/google", json={"token": "google-id-token"})

        assert response.status_code == 422
        assert response.json()["error"] == "Already registered using Google"
