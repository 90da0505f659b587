"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (conftest.py sets test
defaults; export DATABASE__URL for integration tests).
"""

import pytest_asyncio
from dishka import AsyncContainer

from linkshare.adapter.pubsub import EventBus
from linkshare.domain.model import ResolvedCaller, User
from linkshare.interface.graphql import GraphQLContext
from linkshare.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_post_link(unit_env):
            link_service = await unit_env.get(LinkService)
            link = await link_service.create_link("https://a.b", "ab", None)
            assert link.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


async def make_context(
    container: AsyncContainer, user: User | None = None
) -> GraphQLContext:
    """Build a GraphQL context for executing the schema directly.

    Args:
        container: Request-scoped container
        user: Authenticated caller, anonymous if None
    """
    return GraphQLContext(
        container=container,
        caller=ResolvedCaller(user=user),
        event_bus=await container.get(EventBus),
    )
