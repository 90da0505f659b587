"""Comment use cases."""

from .post_comment import PostCommentRequest, PostCommentUseCase

__all__ = [
    "PostCommentRequest",
    "PostCommentUseCase",
]
