"""Application layer DI providers."""

from dishka import Scope, provide

from linkshare.adapter.pubsub import EventBus
from linkshare.application.usecase.auth import LoginUseCase, SignupUseCase
from linkshare.application.usecase.comment import PostCommentUseCase
from linkshare.application.usecase.link import PostLinkUseCase
from linkshare.application.usecase.vote import CastVoteUseCase
from linkshare.domain.service import (
    CommentService,
    JWTService,
    LinkService,
    PasswordService,
    UserService,
    VoteService,
)
from linkshare.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    # Link use cases
    @provide(scope=Scope.REQUEST)
    def get_post_link_use_case(
        self, link_service: LinkService, event_bus: EventBus
    ) -> PostLinkUseCase:
        """Provide post link use case."""
        return PostLinkUseCase(link_service=link_service, event_bus=event_bus)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_post_comment_use_case(
        self, comment_service: CommentService
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, event_bus: EventBus
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, event_bus=event_bus)
