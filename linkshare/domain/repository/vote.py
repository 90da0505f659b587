"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from linkshare.domain.model.vote import Vote
from linkshare.domain.repository.result import WriteResult
from linkshare.domain.value import LinkId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Implementations must enforce uniqueness of (user_id, link_id) atomically;
    it is the authoritative guard against duplicate votes.
    """

    @abstractmethod
    async def find_by_user_and_link(
        self, user_id: UserId, link_id: LinkId
    ) -> Optional[Vote]:
        """Find a user's vote for a specific link.

        Args:
            user_id: The user's ID
            link_id: The link's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_link(self, link_id: LinkId) -> List[Vote]:
        """Find all votes for a link."""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes cast by a user."""
        pass

    @abstractmethod
    async def create(self, user_id: UserId, link_id: LinkId) -> WriteResult[Vote]:
        """Create a vote.

        Args:
            user_id: Voting user
            link_id: Link voted for

        Returns:
            OK with the created vote, a UNIQUE violation if the user already
            voted for the link, or a FOREIGN_KEY violation if the user or
            link does not exist
        """
        pass
