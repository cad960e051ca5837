"""Unit tests for ListThreadsUseCase."""

import pytest

from chatter.application.usecase.thread import ListThreadsRequest, ListThreadsUseCase
from chatter.config import PaginationSettings
from chatter.domain.repository import ThreadRepository, UserRepository
from chatter.domain.service import ThreadService
from tests.conftest import at, make_thread, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListThreadsUseCase:
    """Tests for ListThreadsUseCase."""

    @pytest.mark.asyncio
    async def test_uses_configured_default_page_size(self, unit_env):
        """Should fall back to the configured page size."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        thread_service = await unit_env.get(ThreadService)
        alice = await make_user(user_repo, "alice")
        for minute in range(3):
            await make_thread(thread_repo, alice, f"t{minute}", created_at=at(minute))
        use_case = ListThreadsUseCase(
            thread_service, PaginationSettings(default_page_size=2, max_page_size=10)
        )

        # Act
        response = await use_case.execute(ListThreadsRequest())

        # Assert
        assert [t.text for t in response.threads] == ["t2", "t1"]
        assert response.total == 3
        assert response.is_next is True

    @pytest.mark.asyncio
    async def test_page_size_capped(self, unit_env):
        """Should never return more than the maximum page size."""
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        thread_service = await unit_env.get(ThreadService)
        alice = await make_user(user_repo, "alice")
        for minute in range(4):
            await make_thread(thread_repo, alice, f"t{minute}", created_at=at(minute))
        use_case = ListThreadsUseCase(
            thread_service, PaginationSettings(default_page_size=2, max_page_size=3)
        )

        response = await use_case.execute(ListThreadsRequest(page_size=50))

        assert len(response.threads) == 3
        assert response.is_next is True

    @pytest.mark.asyncio
    async def test_thread_author_in_response(self, unit_env):
        """Each listed thread carries its author summary."""
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = await unit_env.get(ListThreadsUseCase)
        alice = await make_user(user_repo, "alice", name="Alice Liddell")
        await make_thread(thread_repo, alice, "hello")

        response = await use_case.execute(ListThreadsRequest())

        [thread] = response.threads
        assert thread.author.name == "Alice Liddell"
        assert thread.author.user_id == str(alice.id)
        assert thread.children == []
