"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import select

from linkshare.domain.model import Comment
from linkshare.domain.repository import CommentRepository, WriteResult
from linkshare.domain.value import CommentId, LinkId
from linkshare.persistence.mappers import row_to_comment
from linkshare.persistence.repository.base import PostgresRepository
from linkshare.persistence.tables import comments_table


class PostgresCommentRepository(PostgresRepository, CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        return await self._fetch_one(stmt, row_to_comment)

    async def find_all(self) -> List[Comment]:
        """Find every comment."""
        stmt = select(comments_table).order_by(comments_table.c.id)
        return await self._fetch_all(stmt, row_to_comment)

    async def find_by_link(self, link_id: LinkId) -> List[Comment]:
        """Find all comments on a link."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.link_id == link_id)
            .order_by(comments_table.c.id)
        )
        return await self._fetch_all(stmt, row_to_comment)

    async def create(self, link_id: LinkId, body: str) -> WriteResult[Comment]:
        """Create a comment on a link."""
        return await self._insert(
            comments_table, {"link_id": link_id, "body": body}, row_to_comment
        )
