"""In-memory comment repository for testing."""

from typing import List, Optional

from linkshare.domain.model import Comment
from linkshare.domain.repository import CommentRepository, ConstraintKind, WriteResult
from linkshare.domain.value import CommentId, LinkId
from linkshare.persistence.repository.inmemory.store import InMemoryStore, checkpoint


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._store.comments.get(comment_id)
        await checkpoint()
        return comment

    async def find_all(self) -> List[Comment]:
        """Find every comment."""
        comments = sorted(self._store.comments.values(), key=lambda c: c.id)
        await checkpoint()
        return comments

    async def find_by_link(self, link_id: LinkId) -> List[Comment]:
        """Find all comments on a link."""
        comments = [
            c
            for c in sorted(self._store.comments.values(), key=lambda c: c.id)
            if c.link_id == link_id
        ]
        await checkpoint()
        return comments

    async def create(self, link_id: LinkId, body: str) -> WriteResult[Comment]:
        """Create a comment, rejecting unknown links."""
        if link_id not in self._store.links:
            return WriteResult.violated(ConstraintKind.FOREIGN_KEY, "comments_link_id_fkey")
        comment = Comment(
            id=CommentId(self._store.next_id("comments")),
            body=body,
            link_id=link_id,
        )
        self._store.comments[comment.id] = comment
        return WriteResult.ok(comment)
