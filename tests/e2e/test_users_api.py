"""End-to-end tests for user endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from leaderboard.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


def register(client, name: str, email: str | None = None, password: str = "pw"):
    return client.post(
        "/users",
        json={
            "name": name,
            "email": email or f"{name.lower()}@example.com",
            "password": password,
        },
    )


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == "0.1.0"
        assert "timestamp" in body


class TestCreateUser:
    """POST /users."""

    def test_register_returns_201(self, client):
        # Act
        response = register(client, "Alice")

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User created successfully"
        assert body["user"]["name"] == "Alice"
        assert body["user"]["points"] == 0
        assert "password" not in body["user"]
        assert "passwordHash" not in body["user"]

    def test_missing_fields_are_400(self, client):
        response = client.post("/users", json={"name": "Alice"})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Please provide name, email, and password",
            "category": "invalid_input",
        }

    def test_duplicate_email_is_409(self, client):
        register(client, "Alice", email="alice@example.com")

        response = register(client, "Alicia", email="alice@example.com")

        assert response.status_code == 409
        assert response.json()["error"] == "Email already registered"

    def test_duplicate_name_is_409(self, client):
        register(client, "Alice")

        response = register(client, "Alice", email="another@example.com")

        assert response.status_code == 409
        assert response.json()["error"] == "Username already taken"


class TestListAndGetUsers:
    """GET /users and GET /users/{id}."""

    def test_new_users_appear_with_zero_points(self, client):
        # Arrange
        register(client, "Alice")
        register(client, "Bob")

        # Act
        response = client.get("/users")

        # Assert
        assert response.status_code == 200
        users = response.json()["users"]
        assert [u["name"] for u in users] == ["Alice", "Bob"]
        assert [u["rank"] for u in users] == [1, 2]
        assert all(u["points"] == 0 for u in users)
        assert set(users[0]) == {"id", "name", "points", "rank", "joinedAt"}

    def test_get_user_by_id(self, client):
        user_id = register(client, "Alice").json()["user"]["id"]

        response = client.get(f"/users/{user_id}")

        assert response.status_code == 200
        assert response.json()["user"]["name"] == "Alice"

    def test_get_unknown_user_is_404(self, client):
        response = client.get(f"/users/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["category"] == "not_found"

    def test_get_malformed_id_is_400(self, client):
        response = client.get("/users/not-a-uuid")

        assert response.status_code == 400
