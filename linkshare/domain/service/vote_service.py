"""Vote domain service.

Guards the one-vote-per-user-per-link rule. The repository's unique
constraint is authoritative; the lookup before insert only exists to answer
the common case without a failed write. Both paths raise the same error.
"""

from typing import List

import logfire

from linkshare.domain.error import AlreadyVotedError, LinkNotFoundError
from linkshare.domain.model.vote import Vote
from linkshare.domain.repository import ConstraintKind, VoteRepository
from linkshare.domain.value import LinkId, UserId, parse_id

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def cast_vote(self, user_id: UserId, raw_link_id: str) -> Vote:
        """Vote for a link.

        Args:
            user_id: Voting user
            raw_link_id: Client supplied link id

        Returns:
            Created vote

        Raises:
            AlreadyVotedError: If the user already voted for the link,
                whether caught by the lookup or by the unique constraint
            LinkNotFoundError: If the id is malformed or the link does not exist
        """
        with logfire.span("cast_vote", user_id=user_id, link_id=raw_link_id):
            parsed = parse_id(raw_link_id)
            if parsed is None:
                raise LinkNotFoundError(raw_link_id, action="vote")
            link_id = LinkId(parsed)

            existing = await self.vote_repository.find_by_user_and_link(user_id, link_id)
            if existing is not None:
                logfire.warn("Duplicate vote attempt", user_id=user_id, link_id=link_id)
                raise AlreadyVotedError(link_id)

            result = await self.vote_repository.create(user_id=user_id, link_id=link_id)
            if result.violates(ConstraintKind.UNIQUE):
                # Lost a race against a concurrent vote by the same user
                logfire.warn(
                    "Duplicate vote rejected by constraint",
                    user_id=user_id,
                    link_id=link_id,
                )
                raise AlreadyVotedError(link_id)
            if result.violates(ConstraintKind.FOREIGN_KEY):
                logfire.warn("Vote on non-existent link", link_id=link_id)
                raise LinkNotFoundError(raw_link_id, action="vote")

            vote = result.unwrap()
            logfire.info("Vote cast", vote_id=vote.id, user_id=user_id, link_id=link_id)
            return vote

    async def votes_for_link(self, link_id: LinkId) -> List[Vote]:
        """All votes for a link."""
        return await self.vote_repository.find_by_link(link_id)

    async def votes_by_user(self, user_id: UserId) -> List[Vote]:
        """All votes cast by a user."""
        return await self.vote_repository.find_by_user(user_id)
