"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .identity_service import IdentityService, extract_token
from .jwt_service import JWTService
from .link_service import LinkService
from .password_service import PasswordService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "IdentityService",
    "JWTService",
    "LinkService",
    "PasswordService",
    "Service",
    "UserService",
    "VoteService",
    "extract_token",
]
