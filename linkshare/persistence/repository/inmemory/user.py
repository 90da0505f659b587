"""In-memory user repository for testing."""

from typing import Optional

from linkshare.domain.model import User
from linkshare.domain.repository import ConstraintKind, UserRepository, WriteResult
from linkshare.domain.value import UserId
from linkshare.persistence.repository.inmemory.store import InMemoryStore, checkpoint


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        user = self._store.users.get(user_id)
        await checkpoint()
        return user

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        user = next(
            (u for u in self._store.users.values() if u.email == email), None
        )
        await checkpoint()
        return user

    async def create(self, email: str, password_hash: str, name: str) -> WriteResult[User]:
        """Create a user, rejecting duplicate emails."""
        if any(u.email == email for u in self._store.users.values()):
            return WriteResult.violated(ConstraintKind.UNIQUE, "uq_users_email")
        user = User(
            id=UserId(self._store.next_id("users")),
            email=email,
            password_hash=password_hash,
            name=name,
        )
        self._store.users[user.id] = user
        return WriteResult.ok(user)
