"""Comment domain service."""

from typing import List, Optional

import logfire

from linkshare.domain.error import LinkNotFoundError
from linkshare.domain.model.comment import Comment
from linkshare.domain.repository import CommentRepository, ConstraintKind
from linkshare.domain.value import CommentId, LinkId, parse_id

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def list_comments(self) -> List[Comment]:
        """All comments."""
        return await self.comment_repository.find_all()

    async def get_comment(self, raw_id: str) -> Optional[Comment]:
        """Look up a comment by a client supplied id.

        Returns None for ids that are not plain digit strings.
        """
        comment_id = parse_id(raw_id)
        if comment_id is None:
            return None
        return await self.comment_repository.find_by_id(CommentId(comment_id))

    async def comments_for_link(self, link_id: LinkId) -> List[Comment]:
        """All comments on a link."""
        return await self.comment_repository.find_by_link(link_id)

    async def create_comment(self, raw_link_id: str, body: str) -> Comment:
        """Comment on a link.

        A malformed link id is rejected without touching storage; a
        well-formed id for a missing link is detected by the foreign key.

        Args:
            raw_link_id: Client supplied link id
            body: Comment text

        Returns:
            Created comment

        Raises:
            LinkNotFoundError: If the id is malformed or the link does not exist
        """
        with logfire.span("comment_service.create_comment", link_id=raw_link_id):
            link_id = parse_id(raw_link_id)
            if link_id is None:
                logfire.warn("Comment on malformed link id", link_id=raw_link_id)
                raise LinkNotFoundError(raw_link_id)

            result = await self.comment_repository.create(
                link_id=LinkId(link_id), body=body
            )
            if result.violates(ConstraintKind.FOREIGN_KEY):
                logfire.warn("Comment on non-existent link", link_id=link_id)
                raise LinkNotFoundError(raw_link_id)

            comment = result.unwrap()
            logfire.info("Comment created", comment_id=comment.id, link_id=link_id)
            return comment
