"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from linkshare.config import Settings
from linkshare.domain.repository import (
    CommentRepository,
    LinkRepository,
    UserRepository,
    VoteRepository,
)
from linkshare.persistence.database import create_engine, create_session_factory
from linkshare.persistence.repository import (
    PostgresCommentRepository,
    PostgresLinkRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from linkshare.util.di.base import ProviderBase
from linkshare.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    Repositories open a session per operation from the shared factory, so
    they live for the whole application like the engine.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide
    def get_user_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session_factory)

    @provide
    def get_link_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> LinkRepository:
        """Provide Link repository."""
        return PostgresLinkRepository(session_factory)

    @provide
    def get_comment_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session_factory)

    @provide
    def get_vote_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session_factory)
