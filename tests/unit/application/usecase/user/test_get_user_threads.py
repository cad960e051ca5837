"""Unit tests for GetUserUseCase and GetUserThreadsUseCase."""

import pytest

from chatter.application.usecase.user import (
    GetUserRequest,
    GetUserThreadsRequest,
    GetUserThreadsUseCase,
    GetUserUseCase,
)
from chatter.domain.repository import UserRepository
from chatter.domain.service import ThreadService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserUseCase:
    """Tests for GetUserUseCase."""

    @pytest.mark.asyncio
    async def test_found(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(GetUserUseCase)
        await make_user(user_repo, "alice", external_id="user_1")

        user = await use_case.execute(GetUserRequest(external_id="user_1"))

        assert user.username == "alice"

    @pytest.mark.asyncio
    async def test_missing(self, unit_env):
        use_case = await unit_env.get(GetUserUseCase)

        assert await use_case.execute(GetUserRequest(external_id="ghost")) is None


class TestGetUserThreadsUseCase:
    """Tests for GetUserThreadsUseCase."""

    @pytest.mark.asyncio
    async def test_threads_with_replies(self, unit_env):
        """Should return the user's threads in creation order with replies."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_service = await unit_env.get(ThreadService)
        use_case = await unit_env.get(GetUserThreadsUseCase)
        alice = await make_user(user_repo, "alice", external_id="user_1")
        bob = await make_user(user_repo, "bob")
        first = await thread_service.create_thread("first", alice.id)
        await thread_service.create_thread("second", alice.id)
        await thread_service.add_reply(first.id, "reply", bob.id)

        # Act
        response = await use_case.execute(GetUserThreadsRequest(external_id="user_1"))

        # Assert
        assert response.user.username == "alice"
        assert [t.text for t in response.threads] == ["first", "second"]
        [reply] = response.threads[0].children
        assert reply.text == "reply"
        assert reply.author.username == "bob"

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        use_case = await unit_env.get(GetUserThreadsUseCase)

        assert (
            await use_case.execute(GetUserThreadsRequest(external_id="ghost")) is None
        )
