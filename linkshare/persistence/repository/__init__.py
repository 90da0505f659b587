"""PostgreSQL repository implementations."""

from linkshare.persistence.repository.comment import PostgresCommentRepository
from linkshare.persistence.repository.link import PostgresLinkRepository
from linkshare.persistence.repository.user import PostgresUserRepository
from linkshare.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresLinkRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
