"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select

from linkshare.domain.model import User
from linkshare.domain.repository import UserRepository, WriteResult
from linkshare.domain.value import UserId
from linkshare.persistence.mappers import row_to_user
from linkshare.persistence.repository.base import PostgresRepository
from linkshare.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._fetch_one(stmt, row_to_user)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        stmt = select(users_table).where(users_table.c.email == email)
        return await self._fetch_one(stmt, row_to_user)

    async def create(self, email: str, password_hash: str, name: str) -> WriteResult[User]:
        """Create a user."""
        return await self._insert(
            users_table,
            {"email": email, "password_hash": password_hash, "name": name},
            row_to_user,
        )
