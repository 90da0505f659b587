"""In-memory repository implementations for testing."""

from linkshare.persistence.repository.inmemory.comment import InMemoryCommentRepository
from linkshare.persistence.repository.inmemory.link import InMemoryLinkRepository
from linkshare.persistence.repository.inmemory.store import InMemoryStore
from linkshare.persistence.repository.inmemory.user import InMemoryUserRepository
from linkshare.persistence.repository.inmemory.vote import InMemoryVoteRepository

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryLinkRepository",
    "InMemoryCommentRepository",
    "InMemoryVoteRepository",
]
