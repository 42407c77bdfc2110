"""Container fixtures for unit and integration tests."""

import pytest_asyncio

from remark.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture yielding a request-scoped test container.

    The whole container is closed after the test, so APP-scoped mocks never
    leak between tests.

    Args:
        unmock: Components to run with production implementations

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_list_threads(unit_env):
            service = await unit_env.get(CommentService)
    """

    @pytest_asyncio.fixture
    async def _environment():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _environment
