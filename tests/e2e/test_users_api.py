"""End-to-end tests for user endpoints."""

import pytest
from fastapi.testclient import TestClient

from chatter.interface.api.app import create_app
from chatter.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def _save_profile(client, external_id, username, name=None, **fields):
    return client.put(
        f"/users/{external_id}",
        json={"username": username, "name": name or username, **fields},
    )


class TestUserEndpoints:
    """End-to-end tests for user API endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_onboarding_then_fetch(self, client):
        """A saved profile can be fetched by external id."""
        # Act
        saved = _save_profile(client, "user_1", "Alice", bio="Hello")
        fetched = client.get("/users/user_1")

        # Assert
        assert saved.status_code == 200
        assert saved.json()["user"]["username"] == "alice"
        assert saved.json()["user"]["onboarded"] is True
        assert "x-revalidate-path" not in saved.headers
        assert fetched.status_code == 200
        assert fetched.json()["user_id"] == saved.json()["user"]["user_id"]

    def test_profile_edit_sets_revalidate_header(self, client):
        _save_profile(client, "user_1", "alice")

        response = _save_profile(
            client, "user_1", "alice", name="Alice L.", path="/profile/edit"
        )

        assert response.status_code == 200
        assert response.headers["x-revalidate-path"] == "/profile/edit"
        assert response.json()["user"]["name"] == "Alice L."

    def test_get_nonexistent_user(self, client):
        """Should return 404 for nonexistent user."""
        response = client.get("/users/ghost")

        assert response.status_code == 404

    def test_username_taken(self, client):
        """Should return 409 when another user owns the username."""
        _save_profile(client, "user_1", "alice")

        response = _save_profile(client, "user_2", "ALICE")

        assert response.status_code == 409

    def test_name_required(self, client):
        response = client.put("/users/user_1", json={"username": "alice"})

        assert response.status_code == 422

    def test_search(self, client):
        """Search returns cards for other users only."""
        # Arrange
        _save_profile(client, "user_1", "alice", name="Alice Smith")
        _save_profile(client, "user_2", "bob", name="Bob Alison")
        _save_profile(client, "user_3", "carol", name="Carol")

        # Act
        response = client.get("/users", params={"requester": "user_1", "q": "ali"})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert [card["username"] for card in body["users"]] == ["bob"]
        assert body["users"][0]["href"] == "/profile/user_2"
        assert body["users"][0]["person_type"] == "User"
        assert body["is_next"] is False

    def test_search_requires_requester(self, client):
        response = client.get("/users", params={"q": "ali"})

        assert response.status_code == 422

    def test_user_threads(self, client):
        """The profile threads tab lists threads the user started."""
        user = _save_profile(client, "user_1", "alice").json()["user"]
        client.post("/threads", json={"thread": "My thread", "account_id": user["user_id"]})

        response = client.get("/users/user_1/threads")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["username"] == "alice"
        assert [t["text"] for t in body["threads"]] == ["My thread"]
        assert body["threads"][0]["author"]["username"] == "alice"
