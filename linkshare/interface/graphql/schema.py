"""GraphQL schema: queries, mutations and subscriptions."""

from collections.abc import AsyncGenerator
from typing import List, Optional

import logfire
import strawberry
from strawberry.types import ExecutionContext, Info
from graphql import GraphQLError

from linkshare.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from linkshare.application.usecase.comment import PostCommentRequest, PostCommentUseCase
from linkshare.application.usecase.link import PostLinkRequest, PostLinkUseCase
from linkshare.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from linkshare.domain.error import DomainError
from linkshare.domain.service import CommentService, LinkService, UserService
from linkshare.domain.value import Topic
from linkshare.interface.graphql.extensions import ErrorCodeExtension
from linkshare.interface.graphql.types import (
    AuthPayload,
    CommentType,
    LinkOrderByInput,
    LinkType,
    UserType,
    VoteType,
)


@strawberry.type
class Query:
    @strawberry.field
    async def all_link(
        self,
        info: Info,
        filter_needle: Optional[str] = None,
        skip: Optional[int] = None,
        take: Optional[int] = None,
        order_by: Optional[LinkOrderByInput] = None,
    ) -> List[LinkType]:
        """Links, optionally filtered by a substring of description or url."""
        link_service = await info.context.get(LinkService)
        links = await link_service.list_links(
            filter_needle=filter_needle,
            skip=skip,
            take=take,
            order=order_by.to_order() if order_by else None,
        )
        return [LinkType.from_model(link) for link in links]

    @strawberry.field
    async def unique_link(self, info: Info, id: strawberry.ID) -> Optional[LinkType]:
        link_service = await info.context.get(LinkService)
        link = await link_service.get_link(id)
        return LinkType.from_model(link) if link else None

    @strawberry.field
    async def all_comment(self, info: Info) -> List[CommentType]:
        comment_service = await info.context.get(CommentService)
        comments = await comment_service.list_comments()
        return [CommentType.from_model(comment) for comment in comments]

    @strawberry.field
    async def unique_comment(
        self, info: Info, id: strawberry.ID
    ) -> Optional[CommentType]:
        comment_service = await info.context.get(CommentService)
        comment = await comment_service.get_comment(id)
        return CommentType.from_model(comment) if comment else None

    @strawberry.field
    def me(self, info: Info) -> UserType:
        """The authenticated caller."""
        return UserType.from_model(info.context.caller.require_user())

    @strawberry.field
    async def get_user(self, info: Info, id: strawberry.ID) -> Optional[UserType]:
        """Look up a user; only available to authenticated callers."""
        info.context.caller.require_user()
        user_service = await info.context.get(UserService)
        user = await user_service.get_user(id)
        return UserType.from_model(user) if user else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def signup(
        self, info: Info, email: str, password: str, name: str
    ) -> AuthPayload:
        use_case = await info.context.get(SignupUseCase)
        response = await use_case.execute(
            SignupRequest(email=email, password=password, name=name)
        )
        return AuthPayload(token=response.token, user=UserType.from_model(response.user))

    @strawberry.mutation
    async def login(self, info: Info, email: str, password: str) -> AuthPayload:
        use_case = await info.context.get(LoginUseCase)
        response = await use_case.execute(LoginRequest(email=email, password=password))
        return AuthPayload(token=response.token, user=UserType.from_model(response.user))

    @strawberry.mutation
    async def post_link(self, info: Info, url: str, description: str) -> LinkType:
        """Post a link as the caller; announced on ``newLink``."""
        user = info.context.caller.require_user()
        use_case = await info.context.get(PostLinkUseCase)
        link = await use_case.execute(
            PostLinkRequest(url=url, description=description, author_id=user.id)
        )
        return LinkType.from_model(link)

    @strawberry.mutation
    async def post_comment_on_link(
        self, info: Info, link_id: strawberry.ID, body: str
    ) -> CommentType:
        use_case = await info.context.get(PostCommentUseCase)
        comment = await use_case.execute(PostCommentRequest(link_id=link_id, body=body))
        return CommentType.from_model(comment)

    @strawberry.mutation
    async def vote(self, info: Info, link_id: strawberry.ID) -> VoteType:
        """Vote for a link as the caller; announced on ``newVote``."""
        user = info.context.caller.require_user()
        use_case = await info.context.get(CastVoteUseCase)
        vote = await use_case.execute(CastVoteRequest(link_id=link_id, user_id=user.id))
        return VoteType.from_model(vote)


@strawberry.type
class Subscription:
    @strawberry.subscription
    async def new_link(self, info: Info) -> AsyncGenerator[LinkType, None]:
        """Links as they are posted, from the moment of subscribing."""
        async with info.context.event_bus.subscribe(Topic.NEW_LINK) as subscription:
            async for event in subscription:
                yield LinkType.from_model(event.payload)

    @strawberry.subscription
    async def new_vote(self, info: Info) -> AsyncGenerator[VoteType, None]:
        """Votes as they are cast, from the moment of subscribing."""
        async with info.context.event_bus.subscribe(Topic.NEW_VOTE) as subscription:
            async for event in subscription:
                yield VoteType.from_model(event.payload)


class LinkShareSchema(strawberry.Schema):
    """Schema that logs domain errors as expected outcomes, not failures."""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, DomainError):
                logfire.info(
                    "Request rejected",
                    code=error.original_error.code,
                    path=error.path,
                )
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = LinkShareSchema(
    query=Query,
    mutation=Mutation,
    subscription=Subscription,
    extensions=[ErrorCodeExtension],
)
