"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from linkshare.domain.model.comment import Comment
from linkshare.domain.repository.result import WriteResult
from linkshare.domain.value import CommentId, LinkId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Find every comment, in insertion order."""
        pass

    @abstractmethod
    async def find_by_link(self, link_id: LinkId) -> List[Comment]:
        """Find all comments on a link.

        Args:
            link_id: The link ID

        Returns:
            List of comments on the link
        """
        pass

    @abstractmethod
    async def create(self, link_id: LinkId, body: str) -> WriteResult[Comment]:
        """Create a comment on a link.

        Args:
            link_id: Target link
            body: Comment text

        Returns:
            OK with the created comment, or a FOREIGN_KEY violation if the
            link does not exist
        """
        pass
