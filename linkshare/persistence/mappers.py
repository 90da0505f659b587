"""Mappers for converting database rows to domain models."""

from typing import Any, Dict

from linkshare.domain.model import Comment, Link, User, Vote
from linkshare.domain.value import CommentId, LinkId, UserId, VoteId


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        name=row["name"],
    )


def row_to_link(row: Dict[str, Any]) -> Link:
    """Convert database row to Link domain model."""
    author_id = row.get("author_id")
    return Link(
        id=LinkId(row["id"]),
        url=row["url"],
        description=row["description"],
        created_at=row["created_at"],
        author_id=UserId(author_id) if author_id is not None else None,
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        body=row["body"],
        link_id=LinkId(row["link_id"]),
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        link_id=LinkId(row["link_id"]),
    )
