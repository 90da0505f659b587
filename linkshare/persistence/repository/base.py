"""Shared plumbing for PostgreSQL repositories.

Each operation runs in its own short-lived session: sibling GraphQL
resolvers run concurrently and an AsyncSession cannot be shared between
concurrent operations. Writes commit immediately so events published after
a write always describe committed rows.
"""

from typing import Any, Callable, Dict, List, Optional, TypeVar

from sqlalchemy import Table, insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Select

from linkshare.domain.repository import ConstraintKind, WriteResult

T = TypeVar("T")

# PostgreSQL SQLSTATE codes for integrity violations
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

_SQLSTATE_KINDS = {
    UNIQUE_VIOLATION: ConstraintKind.UNIQUE,
    FOREIGN_KEY_VIOLATION: ConstraintKind.FOREIGN_KEY,
}


def constraint_kind(error: IntegrityError) -> Optional[ConstraintKind]:
    """Classify an integrity error by its SQLSTATE.

    Returns None for integrity errors that are neither unique nor foreign
    key violations (e.g. NOT NULL), which callers treat as plain errors.
    """
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return _SQLSTATE_KINDS.get(sqlstate)


def constraint_name(error: IntegrityError) -> Optional[str]:
    """Best-effort name of the violated constraint."""
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


class PostgresRepository:
    """Base class for PostgreSQL repositories."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Factory for short-lived async sessions
        """
        self.session_factory = session_factory

    async def _fetch_one(
        self, stmt: Select, mapper: Callable[[Dict[str, Any]], T]
    ) -> Optional[T]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            row = result.fetchone()
        return mapper(row._asdict()) if row else None

    async def _fetch_all(
        self, stmt: Select, mapper: Callable[[Dict[str, Any]], T]
    ) -> List[T]:
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            rows = result.fetchall()
        return [mapper(row._asdict()) for row in rows]

    async def _insert(
        self,
        table: Table,
        values: Dict[str, Any],
        mapper: Callable[[Dict[str, Any]], T],
    ) -> WriteResult[T]:
        """Insert a row and commit, reporting failures as a tagged result."""
        stmt = insert(table).values(**values).returning(table)
        async with self.session_factory() as session:
            try:
                result = await session.execute(stmt)
                row = result.fetchone()
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                kind = constraint_kind(e)
                if kind is None:
                    return WriteResult.failed(e)
                return WriteResult.violated(kind, constraint_name(e))
            except SQLAlchemyError as e:
                await session.rollback()
                return WriteResult.failed(e)
        return WriteResult.ok(mapper(row._asdict()))
