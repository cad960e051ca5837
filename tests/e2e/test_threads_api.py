"""End-to-end tests for thread and activity endpoints."""

from uuid import uuid4

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


def _user_id(client, external_id, username):
    response = client.put(
        f"/users/{external_id}", json={"username": username, "name": username}
    )
    return response.json()["user"]["user_id"]


def _post_thread(client, account_id, text="Hello world"):
    return client.post("/threads", json={"thread": text, "account_id": account_id})


class TestThreadEndpoints:
    """End-to-end tests for thread API endpoints."""

    def test_create_thread(self, client):
        """Posting a thread answers with the thread and navigates home."""
        # Arrange
        alice = _user_id(client, "user_1", "alice")

        # Act
        response = _post_thread(client, alice)

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["redirect_to"] == "/"
        assert body["thread"]["text"] == "Hello world"
        assert body["thread"]["parent_id"] is None
        assert response.headers["x-revalidate-path"] == "/"

    def test_short_thread_rejected(self, client):
        """Form validation rejects texts under 3 characters."""
        alice = _user_id(client, "user_1", "alice")

        response = _post_thread(client, alice, text="Hi")

        assert response.status_code == 422
        assert "Minimum of 3 characters" in response.text
        assert client.get("/threads").json()["threads"] == []

    def test_missing_account_rejected(self, client):
        response = client.post("/threads", json={"thread": "Hello"})

        assert response.status_code == 422

    def test_malformed_account_id(self, client):
        response = _post_thread(client, "not-a-uuid")

        assert response.status_code == 422

    def test_unknown_author(self, client):
        response = _post_thread(client, str(uuid4()))

        assert response.status_code == 404

    def test_feed_lists_top_level_threads_newest_first(self, client):
        """The feed shows top-level threads with their replies."""
        # Arrange
        alice = _user_id(client, "user_1", "alice")
        bob = _user_id(client, "user_2", "bob")
        first = _post_thread(client, alice, "First thread").json()["thread"]
        _post_thread(client, alice, "Second thread")
        client.post(
            f"/threads/{first['thread_id']}/replies",
            json={"thread": "A reply", "account_id": bob},
        )

        # Act
        response = client.get("/threads")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert [t["text"] for t in body["threads"]] == ["Second thread", "First thread"]
        assert body["threads"][1]["children"][0]["text"] == "A reply"
        assert body["threads"][1]["children"][0]["author"]["username"] == "bob"
        assert body["is_next"] is False

    def test_feed_pagination(self, client):
        alice = _user_id(client, "user_1", "alice")
        for i in range(3):
            _post_thread(client, alice, f"Thread {i}")

        response = client.get("/threads", params={"page": 1, "page_size": 2})

        assert len(response.json()["threads"]) == 2
        assert response.json()["is_next"] is True

    def test_reply_flow(self, client):
        """A reply shows up on the thread page with its author."""
        # Arrange
        alice = _user_id(client, "user_1", "alice")
        bob = _user_id(client, "user_2", "bob")
        thread = _post_thread(client, alice).json()["thread"]

        # Act
        reply = client.post(
            f"/threads/{thread['thread_id']}/replies",
            json={"thread": "Nice one", "account_id": bob},
        )
        page = client.get(f"/threads/{thread['thread_id']}")

        # Assert
        assert reply.status_code == 201
        assert reply.json()["reply"]["parent_id"] == thread["thread_id"]
        assert reply.headers["x-revalidate-path"] == f"/thread/{thread['thread_id']}"
        assert page.status_code == 200
        [child] = page.json()["thread"]["children"]
        assert child["text"] == "Nice one"
        assert child["author"]["username"] == "bob"

    def test_reply_to_missing_thread(self, client):
        alice = _user_id(client, "user_1", "alice")

        response = client.post(
            f"/threads/{uuid4()}/replies",
            json={"thread": "Anyone?", "account_id": alice},
        )

        assert response.status_code == 404

    def test_short_reply_rejected(self, client):
        alice = _user_id(client, "user_1", "alice")
        thread = _post_thread(client, alice).json()["thread"]

        response = client.post(
            f"/threads/{thread['thread_id']}/replies",
            json={"thread": "ok", "account_id": alice},
        )

        assert response.status_code == 422

    def test_long_thread_and_reply_accepted(self, client):
        """Text has a minimum length but no maximum."""
        alice = _user_id(client, "user_1", "alice")
        long_text = "x" * 10001

        created = _post_thread(client, alice, text=long_text)
        reply = client.post(
            f"/threads/{created.json()['thread']['thread_id']}/replies",
            json={"thread": long_text, "account_id": alice},
        )

        assert created.status_code == 201
        assert created.json()["thread"]["text"] == long_text
        assert reply.status_code == 201
        assert reply.json()["reply"]["text"] == long_text

    def test_get_missing_thread(self, client):
        response = client.get(f"/threads/{uuid4()}")

        assert response.status_code == 404

    def test_activity(self, client):
        """Activity lists others' replies to the user's threads."""
        # Arrange
        alice = _user_id(client, "user_1", "alice")
        bob = _user_id(client, "user_2", "bob")
        thread = _post_thread(client, alice).json()["thread"]
        for account_id, text in [(bob, "From bob"), (alice, "From alice")]:
            client.post(
                f"/threads/{thread['thread_id']}/replies",
                json={"thread": text, "account_id": account_id},
            )

        # Act
        response = client.get(f"/activity/{alice}")

        # Assert
        assert response.status_code == 200
        replies = response.json()["replies"]
        assert [r["text"] for r in replies] == ["From bob"]
        assert replies[0]["author"]["username"] == "bob"


class TestDatabaseNotConfigured:
    """Production persistence without DATABASE__URL."""

    def test_data_routes_answer_503(self, monkeypatch):
        monkeypatch.delenv("DATABASE__URL", raising=False)
        app_instance = create_app()
        setup_di(app_instance, build_test_container(unmock={"persistence"}))
        client = TestClient(app_instance)

        assert client.get("/health").status_code == 200
        assert client.get("/threads").status_code == 503
