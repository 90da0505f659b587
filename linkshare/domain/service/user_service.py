"""User domain service."""

from typing import Optional

import logfire

from linkshare.domain.error import EmailAlreadyRegisteredError
from linkshare.domain.model.user import User
from linkshare.domain.repository import ConstraintKind, UserRepository
from linkshare.domain.value import UserId, parse_id

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get a user by ID."""
        return await self.user_repository.find_by_id(user_id)

    async def get_user(self, raw_id: str) -> Optional[User]:
        """Look up a user by a client supplied id.

        Returns None for ids that are not plain digit strings.
        """
        user_id = parse_id(raw_id)
        if user_id is None:
            return None
        return await self.user_repository.find_by_id(UserId(user_id))

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        return await self.user_repository.find_by_email(email)

    async def create_user(self, email: str, password_hash: str, name: str) -> User:
        """Create a user.

        Args:
            email: Unique email address
            password_hash: bcrypt hash, never the plain password
            name: Display name

        Returns:
            Created user

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        with logfire.span("user_service.create_user", name=name):
            result = await self.user_repository.create(
                email=email, password_hash=password_hash, name=name
            )
            if result.violates(ConstraintKind.UNIQUE):
                logfire.warn("Signup with registered email")
                raise EmailAlreadyRegisteredError(email)

            user = result.unwrap()
            logfire.info("User created", user_id=user.id)
            return user
