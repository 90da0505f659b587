"""Identity resolution for incoming requests."""

from typing import Optional

import logfire

from linkshare.domain.error import InvalidCredentialError
from linkshare.domain.model.caller import ResolvedCaller
from linkshare.domain.repository import UserRepository
from linkshare.domain.value import UserId
from linkshare.util.error import JWTError

from .base import Service
from .jwt_service import JWTService


def extract_token(authorization: str) -> str:
    """Take the token from a ``"<scheme> <token>"`` header value.

    The scheme is ignored; everything after the first space is the token.

    Raises:
        InvalidCredentialError: If there is no token part
    """
    _scheme, separator, token = authorization.partition(" ")
    if not separator or not token:
        raise InvalidCredentialError("authorization header must be '<scheme> <token>'")
    return token


class IdentityService(Service):
    """Resolves the caller of a request from its bearer credential."""

    def __init__(self, jwt_service: JWTService, user_repository: UserRepository) -> None:
        """Initialize identity service.

        Args:
            jwt_service: Token verification
            user_repository: User lookup for the token's subject
        """
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    def authenticate(self, authorization: str) -> UserId:
        """Validate a credential and return the user id it was issued for.

        Args:
            authorization: Header value of the form ``"<scheme> <token>"``

        Returns:
            User ID embedded in the token

        Raises:
            InvalidCredentialError: If the header is malformed or the token is
                forged or expired
        """
        token = extract_token(authorization)
        try:
            payload = self.jwt_service.verify_token(token)
        except JWTError as e:
            raise InvalidCredentialError(str(e))
        return UserId(payload.user_id)

    async def resolve(self, authorization: Optional[str]) -> ResolvedCaller:
        """Resolve the caller for a request.

        Never fails: a missing or invalid credential, or a token for a user
        that no longer exists, all resolve to an anonymous caller.

        Args:
            authorization: Authorization header value, if any

        Returns:
            The authenticated caller or anonymous
        """
        if authorization is None:
            return ResolvedCaller.anonymous()

        try:
            user_id = self.authenticate(authorization)
        except InvalidCredentialError as e:
            logfire.debug("Credential rejected, treating as anonymous", reason=e.reason)
            return ResolvedCaller.anonymous()

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.info("Credential for unknown user, treating as anonymous", user_id=user_id)
            return ResolvedCaller.anonymous()

        return ResolvedCaller(user=user)
