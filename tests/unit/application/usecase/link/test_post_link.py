"""Unit tests for PostLinkUseCase."""

import pytest

from linkshare.adapter.pubsub import EventBus
from linkshare.application.usecase.link import PostLinkRequest, PostLinkUseCase
from linkshare.domain.repository import LinkRepository, UserRepository
from linkshare.domain.value import Topic
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPostLinkUseCase:
    """Tests for PostLinkUseCase."""

    @pytest.mark.asyncio
    async def test_post_link_stores_and_publishes(self, unit_env):
        post_link_use_case = await unit_env.get(PostLinkUseCase)
        event_bus = await unit_env.get(EventBus)
        link_repo = await unit_env.get(LinkRepository)
        user_repo = await unit_env.get(UserRepository)
        author = (await user_repo.create("ann@example.com", "hash", "Ann")).unwrap()
        subscription = event_bus.subscribe(Topic.NEW_LINK)

        link = await post_link_use_case.execute(
            PostLinkRequest(
                url="https://graphql.org", description="GraphQL", author_id=author.id
            )
        )

        assert link.author_id == author.id
        assert await link_repo.find_by_id(link.id) == link

        event = await subscription.__anext__()
        assert event.topic is Topic.NEW_LINK
        assert event.payload == link
        subscription.close()
