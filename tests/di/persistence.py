"""Mock persistence providers for testing."""

from dishka import Scope, provide

from linkshare.domain.repository import (
    CommentRepository,
    LinkRepository,
    UserRepository,
    VoteRepository,
)
from linkshare.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLinkRepository,
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from linkshare.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    One store per container: each test builds its own container, so tests
    are isolated while requests within a test share data.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide
    def get_link_repository(self, store: InMemoryStore) -> LinkRepository:
        """Provide in-memory link repository."""
        return InMemoryLinkRepository(store)

    @provide
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)
