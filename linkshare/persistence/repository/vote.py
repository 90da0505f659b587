"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, select

from linkshare.domain.model import Vote
from linkshare.domain.repository import VoteRepository, WriteResult
from linkshare.domain.value import LinkId, UserId
from linkshare.persistence.mappers import row_to_vote
from linkshare.persistence.repository.base import PostgresRepository
from linkshare.persistence.tables import votes_table


class PostgresVoteRepository(PostgresRepository, VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Uniqueness of (user_id, link_id) is enforced by the ``uq_vote_user_link``
    constraint.
    """

    async def find_by_user_and_link(
        self, user_id: UserId, link_id: LinkId
    ) -> Optional[Vote]:
        """Find a user's vote for a specific link."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.link_id == link_id,
            )
        )
        return await self._fetch_one(stmt, row_to_vote)

    async def find_by_link(self, link_id: LinkId) -> List[Vote]:
        """Find all votes for a link."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.link_id == link_id)
            .order_by(votes_table.c.id)
        )
        return await self._fetch_all(stmt, row_to_vote)

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes cast by a user."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.user_id == user_id)
            .order_by(votes_table.c.id)
        )
        return await self._fetch_all(stmt, row_to_vote)

    async def create(self, user_id: UserId, link_id: LinkId) -> WriteResult[Vote]:
        """Create a vote."""
        return await self._insert(
            votes_table, {"user_id": user_id, "link_id": link_id}, row_to_vote
        )
