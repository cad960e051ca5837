"""Test harness for unit and integration tests.

Unit tests run against in-memory persistence. Integration tests unmock
persistence and need a migrated PostgreSQL database at ``DATABASE__URL``.
"""

import pytest_asyncio

from chatter.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh container per test and yields a
    request-scoped child container for service access.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_thread(unit_env):
            service = await unit_env.get(ThreadService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())
        async with container() as request_container:
            yield request_container
        await container.close()

    return _test_environment
