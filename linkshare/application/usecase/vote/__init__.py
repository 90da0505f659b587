"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
]
