"""GraphQL object types.

Each type carries its entity's scalar fields plus the foreign keys needed to
resolve relations. Relations are async field resolvers, so the storage is
only queried for relations the client actually selected.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

import strawberry
from strawberry.types import Info

from linkshare.domain.model import Comment, Link, User, Vote
from linkshare.domain.service import CommentService, LinkService, UserService, VoteService
from linkshare.domain.value import LinkId, LinkOrder, SortDirection, UserId


def to_global_id(value: int) -> strawberry.ID:
    return strawberry.ID(str(value))


@strawberry.enum(name="Sort")
class Sort(Enum):
    asc = "asc"
    desc = "desc"

    def to_direction(self) -> SortDirection:
        return SortDirection(self.value)


@strawberry.input(name="LinkOrderByInput")
class LinkOrderByInput:
    """Sort order for ``allLink``; description wins over url over createdAt."""

    description: Optional[Sort] = None
    url: Optional[Sort] = None
    created_at: Optional[Sort] = None

    def to_order(self) -> LinkOrder:
        return LinkOrder(
            description=self.description.to_direction() if self.description else None,
            url=self.url.to_direction() if self.url else None,
            created_at=self.created_at.to_direction() if self.created_at else None,
        )


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    email: str
    name: str

    user_id: strawberry.Private[UserId]

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        return cls(
            id=to_global_id(user.id),
            email=user.email,
            name=user.name,
            user_id=user.id,
        )

    @strawberry.field
    async def links(self, info: Info) -> List["LinkType"]:
        """Links posted by this user."""
        link_service = await info.context.get(LinkService)
        links = await link_service.links_by_author(self.user_id)
        return [LinkType.from_model(link) for link in links]

    @strawberry.field
    async def votes(self, info: Info) -> List["VoteType"]:
        """Votes cast by this user."""
        vote_service = await info.context.get(VoteService)
        votes = await vote_service.votes_by_user(self.user_id)
        return [VoteType.from_model(vote) for vote in votes]


@strawberry.type(name="Link")
class LinkType:
    id: strawberry.ID
    url: str
    description: str
    created_at: datetime

    link_id: strawberry.Private[LinkId]
    author_id: strawberry.Private[Optional[UserId]]

    @classmethod
    def from_model(cls, link: Link) -> "LinkType":
        return cls(
            id=to_global_id(link.id),
            url=link.url,
            description=link.description,
            created_at=link.created_at,
            link_id=link.id,
            author_id=link.author_id,
        )

    @strawberry.field
    async def comments(self, info: Info) -> List["CommentType"]:
        comment_service = await info.context.get(CommentService)
        comments = await comment_service.comments_for_link(self.link_id)
        return [CommentType.from_model(comment) for comment in comments]

    @strawberry.field
    async def author(self, info: Info) -> Optional[UserType]:
        """User who posted the link, null for anonymous links."""
        if self.author_id is None:
            return None
        user_service = await info.context.get(UserService)
        user = await user_service.get_by_id(self.author_id)
        return UserType.from_model(user) if user else None

    @strawberry.field
    async def votes(self, info: Info) -> List["VoteType"]:
        vote_service = await info.context.get(VoteService)
        votes = await vote_service.votes_for_link(self.link_id)
        return [VoteType.from_model(vote) for vote in votes]


@strawberry.type(name="Comment")
class CommentType:
    id: strawberry.ID
    body: str
    link_id: strawberry.ID

    parent_link_id: strawberry.Private[LinkId]

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentType":
        return cls(
            id=to_global_id(comment.id),
            body=comment.body,
            link_id=to_global_id(comment.link_id),
            parent_link_id=comment.link_id,
        )

    @strawberry.field
    async def link(self, info: Info) -> Optional[LinkType]:
        """Link the comment was posted on."""
        link_service = await info.context.get(LinkService)
        link = await link_service.get_link_by_id(self.parent_link_id)
        return LinkType.from_model(link) if link else None


@strawberry.type(name="Vote")
class VoteType:
    id: strawberry.ID

    link_id: strawberry.Private[LinkId]
    user_id: strawberry.Private[UserId]

    @classmethod
    def from_model(cls, vote: Vote) -> "VoteType":
        return cls(id=to_global_id(vote.id), link_id=vote.link_id, user_id=vote.user_id)

    @strawberry.field
    async def link(self, info: Info) -> Optional[LinkType]:
        link_service = await info.context.get(LinkService)
        link = await link_service.get_link_by_id(self.link_id)
        return LinkType.from_model(link) if link else None

    @strawberry.field
    async def user(self, info: Info) -> Optional[UserType]:
        user_service = await info.context.get(UserService)
        user = await user_service.get_by_id(self.user_id)
        return UserType.from_model(user) if user else None


@strawberry.type(name="AuthPayload")
class AuthPayload:
    token: str
    user: UserType
