"""Integration tests for the PostgreSQL repositories.

Require a migrated database reachable at DATABASE__URL.
"""

import asyncio
import os
from uuid import uuid4

import pytest

from linkshare.domain.error import AlreadyVotedError, LinkNotFoundError
from linkshare.domain.repository import (
    CommentRepository,
    ConstraintKind,
    LinkRepository,
    UserRepository,
    VoteRepository,
)
from linkshare.domain.service import VoteService
from linkshare.domain.value import LinkId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


async def create_user(integration_env):
    user_repo = await integration_env.get(UserRepository)
    email = f"{uuid4()}@example.com"
    return (await user_repo.create(email, "hash", "Integration")).unwrap()


class TestPostgresRepositories:
    """Constraint violations come back as tagged results."""

    @pytest.mark.asyncio
    async def test_duplicate_email_is_unique_violation(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await create_user(integration_env)

        result = await user_repo.create(user.email, "hash", "Again")

        assert result.violates(ConstraintKind.UNIQUE)

    @pytest.mark.asyncio
    async def test_comment_on_missing_link_is_foreign_key_violation(
        self, integration_env
    ):
        comment_repo = await integration_env.get(CommentRepository)

        result = await comment_repo.create(LinkId(2_000_000_000), "hello")

        assert result.violates(ConstraintKind.FOREIGN_KEY)

    @pytest.mark.asyncio
    async def test_link_round_trip(self, integration_env):
        link_repo = await integration_env.get(LinkRepository)
        user = await create_user(integration_env)

        link = (await link_repo.create("https://a.io", "integration", user.id)).unwrap()

        assert await link_repo.find_by_id(link.id) == link
        assert link in await link_repo.find_by_author(user.id)

    @pytest.mark.asyncio
    async def test_concurrent_votes_exactly_one_succeeds(self, integration_env):
        vote_service = await integration_env.get(VoteService)
        vote_repo = await integration_env.get(VoteRepository)
        link_repo = await integration_env.get(LinkRepository)
        user = await create_user(integration_env)
        link = (await link_repo.create("https://race.io", "race")).unwrap()

        results = await asyncio.gather(
            *(vote_service.cast_vote(user.id, str(link.id)) for _ in range(8)),
            return_exceptions=True,
        )

        assert sum(not isinstance(r, Exception) for r in results) == 1
        assert all(
            isinstance(r, AlreadyVotedError) for r in results if isinstance(r, Exception)
        )
        assert len(await vote_repo.find_by_link(link.id)) == 1

    @pytest.mark.asyncio
    async def test_vote_on_missing_link(self, integration_env):
        vote_service = await integration_env.get(VoteService)
        user = await create_user(integration_env)

        with pytest.raises(LinkNotFoundError):
            await vote_service.cast_vote(user.id, "2000000000")
