"""Link use cases."""

from .post_link import PostLinkRequest, PostLinkUseCase

__all__ = [
    "PostLinkRequest",
    "PostLinkUseCase",
]
