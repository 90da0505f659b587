"""Login use case."""

import logfire
from pydantic import BaseModel, Field

from linkshare.application.usecase.base import BaseUseCase
from linkshare.domain.error import InvalidPasswordError, UserNotFoundError
from linkshare.domain.model import User
from linkshare.domain.service import JWTService, PasswordService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str = Field(repr=False)


class AuthResponse(BaseModel):
    """Session token together with the user it authenticates."""

    token: str
    user: User


class LoginUseCase(BaseUseCase):
    """Use case for exchanging email and password for a session token."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            password_service: Password verification
            jwt_service: Session token issuing
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Raises:
            UserNotFoundError: If no user has the email
            InvalidPasswordError: If the password does not match
            PasswordTooLongError: If the password exceeds 72 bytes
        """
        with logfire.span("login"):
            user = await self.user_service.get_by_email(request.email)
            if user is None:
                logfire.info("Login for unknown email")
                raise UserNotFoundError(request.email)

            if not await self.password_service.verify_password(
                request.password, user.password_hash
            ):
                logfire.info("Login with wrong password", user_id=user.id)
                raise InvalidPasswordError()

            token = self.jwt_service.create_token(user.id)
            logfire.info("User logged in", user_id=user.id)
            return AuthResponse(token=token, user=user)
