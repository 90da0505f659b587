"""Signup use case."""

import logfire
from pydantic import BaseModel, Field

from linkshare.application.usecase.auth.login import AuthResponse
from linkshare.application.usecase.base import BaseUseCase
from linkshare.domain.service import JWTService, PasswordService, UserService


class SignupRequest(BaseModel):
    """Signup request."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)
    name: str = Field(min_length=1)


class SignupUseCase(BaseUseCase):
    """Use case for registering a new user."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            password_service: Password hashing
            jwt_service: Session token issuing
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Execute signup flow.

        Steps:
        1. Hash the password (the plain password goes no further)
        2. Create the user
        3. Issue a session token

        Raises:
            PasswordTooLongError: If the password exceeds 72 bytes
            EmailAlreadyRegisteredError: If the email is taken
        """
        with logfire.span("signup", name=request.name):
            password_hash = await self.password_service.hash_password(request.password)
            user = await self.user_service.create_user(
                email=request.email, password_hash=password_hash, name=request.name
            )
            token = self.jwt_service.create_token(user.id)
            return AuthResponse(token=token, user=user)
