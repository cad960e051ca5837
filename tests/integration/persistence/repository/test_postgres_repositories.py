"""Integration tests for the PostgreSQL repositories.

Need a migrated database at DATABASE__URL; skipped otherwise. Every test
uses fresh identifiers, so data left by earlier runs does not interfere.
"""

import os
from uuid import uuid4

import pytest

from chatter.domain.error import UsernameTakenError
from chatter.domain.model import User
from chatter.domain.repository import ThreadRepository, UserRepository
from chatter.domain.value import ExternalId, UserId, Username
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_upsert_keeps_id_and_threads(self, integration_env):
        """Saving a known external id updates the row in place."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        external_id = _unique("ext")
        user = await make_user(user_repo, _unique("u"), external_id=external_id)
        thread_id = uuid4()
        await user_repo.append_thread(user.id, thread_id)

        # Act
        updated = await user_repo.save(
            User(
                id=UserId(uuid4()),
                external_id=ExternalId(external_id),
                username=user.username,
                name="Renamed",
            )
        )

        # Assert
        assert updated.id == user.id
        assert updated.name == "Renamed"
        assert updated.thread_ids == [thread_id]

    @pytest.mark.asyncio
    async def test_username_unique(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        taken = await make_user(user_repo, _unique("u"))

        with pytest.raises(UsernameTakenError):
            await user_repo.save(
                User(
                    id=UserId(uuid4()),
                    external_id=ExternalId(_unique("ext")),
                    username=Username(taken.username.root),
                    name="Copycat",
                )
            )

    @pytest.mark.asyncio
    async def test_search_escapes_wildcards(self, integration_env):
        """A '%' in the search text matches a literal percent sign."""
        user_repo = await integration_env.get(UserRepository)
        marker = _unique("pct")
        await make_user(user_repo, _unique("u"), name=f"{marker} 100% sure")
        await make_user(user_repo, _unique("u"), name=f"{marker} 100 sure")

        found = await user_repo.search(ExternalId("nobody"), f"{marker} 100%")

        assert [u.name for u in found] == [f"{marker} 100% sure"]


class TestPostgresThreadRepository:
    """Integration tests for PostgresThreadRepository."""

    @pytest.mark.asyncio
    async def test_children_kept_in_order(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        author = await make_user(user_repo, _unique("u"))
        root = await make_thread(thread_repo, author, "root")

        # Act
        first = await make_thread(thread_repo, author, "first", parent=root)
        second = await make_thread(thread_repo, author, "second", parent=root)

        # Assert
        stored = await thread_repo.find_by_id(root.id)
        assert stored.children_ids == [first.id, second.id]
        found = await thread_repo.find_by_ids([second.id, first.id])
        assert [t.id for t in found] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_find_by_ids_excludes_author(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        alice = await make_user(user_repo, _unique("u"))
        bob = await make_user(user_repo, _unique("u"))
        root = await make_thread(thread_repo, alice, "root")
        own = await make_thread(thread_repo, alice, "own", parent=root)
        other = await make_thread(thread_repo, bob, "other", parent=root)

        found = await thread_repo.find_by_ids(
            [own.id, other.id], exclude_author_id=alice.id
        )

        assert [t.id for t in found] == [other.id]

    @pytest.mark.asyncio
    async def test_top_level_excludes_replies(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        thread_repo = await integration_env.get(ThreadRepository)
        author = await make_user(user_repo, _unique("u"))
        root = await make_thread(thread_repo, author, "root")
        await make_thread(thread_repo, author, "reply", parent=root)

        threads = await thread_repo.find_top_level(limit=100)

        assert all(t.parent_id is None for t in threads)
