"""Unit tests for AddReplyUseCase."""

from uuid import uuid4

import pytest

from chatter.application.usecase.thread import (
    AddReplyRequest,
    AddReplyUseCase,
    GetThreadRequest,
    GetThreadUseCase,
)
from chatter.domain.error import NotFoundError
from chatter.domain.repository import ThreadRepository, UnitOfWork, UserRepository
from chatter.domain.service import RevalidationRecorder
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddReplyUseCase:
    """Tests for AddReplyUseCase."""

    @pytest.mark.asyncio
    async def test_reply_visible_on_thread(self, unit_env):
        """After replying to A, A's thread page lists the reply."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        add_reply = await unit_env.get(AddReplyUseCase)
        get_thread = await unit_env.get(GetThreadUseCase)
        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")
        thread = await make_thread(thread_repo, alice, "Question?")
        recorder = RevalidationRecorder()

        # Act
        response = await add_reply.execute(
            AddReplyRequest(
                thread_id=str(thread.id),
                text="Answer!",
                author_id=str(bob.id),
                path=f"/thread/{thread.id}",
            ),
            revalidate=recorder,
        )

        # Assert
        assert response.reply.parent_id == str(thread.id)
        assert recorder.paths == [f"/thread/{thread.id}"]

        page = await get_thread.execute(GetThreadRequest(thread_id=str(thread.id)))
        [child] = page.thread.children
        assert child.thread_id == response.reply.thread_id
        assert child.author.username == "bob"
        assert page.thread.reply_count == 1

    @pytest.mark.asyncio
    async def test_missing_thread(self, unit_env):
        """Replying to a missing thread fails and stores nothing."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        add_reply = await unit_env.get(AddReplyUseCase)
        alice = await make_user(user_repo, "alice")
        recorder = RevalidationRecorder()

        # Act & Assert
        with pytest.raises(NotFoundError):
            await add_reply.execute(
                AddReplyRequest(
                    thread_id=str(uuid4()),
                    text="Anyone?",
                    author_id=str(alice.id),
                    path="/",
                ),
                revalidate=recorder,
            )
        assert recorder.paths == []
        assert await thread_repo.find_by_author(alice.id) == []

    @pytest.mark.asyncio
    async def test_link_failure_discards_reply(self, unit_env):
        """If linking to the parent fails, the saved reply is rolled back too."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        unit_of_work = await unit_env.get(UnitOfWork)
        add_reply = await unit_env.get(AddReplyUseCase)
        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")
        thread = await make_thread(thread_repo, alice, "Question?")
        recorder = RevalidationRecorder()

        async def broken_append_child(parent_id, child_id):
            raise RuntimeError("connection lost")

        thread_repo.append_child = broken_append_child

        # Act & Assert
        with pytest.raises(RuntimeError):
            await add_reply.execute(
                AddReplyRequest(
                    thread_id=str(thread.id),
                    text="Answer!",
                    author_id=str(bob.id),
                    path=f"/thread/{thread.id}",
                ),
                revalidate=recorder,
            )
        assert await thread_repo.find_by_author(bob.id) == []
        parent = await thread_repo.find_by_id(thread.id)
        assert parent.children_ids == []
        assert unit_of_work.rollbacks == 1
        assert recorder.paths == []
