"""In-memory vote repository for testing."""

from typing import List, Optional

from linkshare.domain.model import Vote
from linkshare.domain.repository import ConstraintKind, VoteRepository, WriteResult
from linkshare.domain.value import LinkId, UserId, VoteId
from linkshare.persistence.repository.inmemory.store import InMemoryStore, checkpoint


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    ``create`` checks and inserts without yielding, so it is atomic with
    respect to other coroutines like the database's unique constraint.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_and_link(
        self, user_id: UserId, link_id: LinkId
    ) -> Optional[Vote]:
        """Find a user's vote for a specific link."""
        vote = next(
            (
                v
                for v in self._store.votes.values()
                if v.user_id == user_id and v.link_id == link_id
            ),
            None,
        )
        await checkpoint()
        return vote

    async def find_by_link(self, link_id: LinkId) -> List[Vote]:
        """Find all votes for a link."""
        votes = [v for v in self._store.votes.values() if v.link_id == link_id]
        await checkpoint()
        return votes

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes cast by a user."""
        votes = [v for v in self._store.votes.values() if v.user_id == user_id]
        await checkpoint()
        return votes

    async def create(self, user_id: UserId, link_id: LinkId) -> WriteResult[Vote]:
        """Create a vote."""
        if user_id not in self._store.users:
            return WriteResult.violated(ConstraintKind.FOREIGN_KEY, "votes_user_id_fkey")
        if link_id not in self._store.links:
            return WriteResult.violated(ConstraintKind.FOREIGN_KEY, "votes_link_id_fkey")
        if any(
            v.user_id == user_id and v.link_id == link_id
            for v in self._store.votes.values()
        ):
            return WriteResult.violated(ConstraintKind.UNIQUE, "uq_vote_user_link")
        vote = Vote(
            id=VoteId(self._store.next_id("votes")),
            user_id=user_id,
            link_id=link_id,
        )
        self._store.votes[vote.id] = vote
        return WriteResult.ok(vote)
