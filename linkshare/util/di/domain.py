"""Domain layer DI providers."""

from dishka import Scope, provide

from linkshare.config import AuthSettings, ListingSettings
from linkshare.domain.repository import (
    CommentRepository,
    LinkRepository,
    UserRepository,
    VoteRepository,
)
from linkshare.domain.service import (
    CommentService,
    IdentityService,
    JWTService,
    LinkService,
    PasswordService,
    UserService,
    VoteService,
)
from linkshare.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped: each GraphQL operation gets fresh
    service instances over the application's repositories.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing domain service."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> IdentityService:
        """Provide caller identity resolution."""
        return IdentityService(jwt_service=jwt_service, user_repository=user_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_link_service(
        self, link_repository: LinkRepository, listing_settings: ListingSettings
    ) -> LinkService:
        """Provide link domain service."""
        return LinkService(
            link_repository=link_repository, listing_settings=listing_settings
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(self, vote_repository: VoteRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository)
