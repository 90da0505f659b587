"""Resolved caller for a single request."""

from typing import Optional

from linkshare.domain.error import UnauthenticatedError
from linkshare.domain.model.common import DomainModel
from linkshare.domain.model.user import User


class ResolvedCaller(DomainModel):
    """Identity attached to a request: an authenticated user or anonymous.

    Constructed once per request and never persisted.
    """

    user: Optional[User] = None

    @classmethod
    def anonymous(cls) -> "ResolvedCaller":
        """Caller without an identity."""
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def require_user(self) -> User:
        """Return the authenticated user.

        Raises:
            UnauthenticatedError: If the caller is anonymous
        """
        if self.user is None:
            raise UnauthenticatedError()
        return self.user
