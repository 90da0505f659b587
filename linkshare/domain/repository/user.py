"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from linkshare.domain.model.user import User
from linkshare.domain.repository.result import WriteResult
from linkshare.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, email: str, password_hash: str, name: str) -> WriteResult[User]:
        """Create a user.

        Args:
            email: Unique email address
            password_hash: bcrypt hash of the password
            name: Display name

        Returns:
            OK with the created user, or a UNIQUE violation if the email is taken
        """
        pass
