"""Repository interfaces for LinkShare domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from linkshare.domain.repository.comment import CommentRepository
from linkshare.domain.repository.link import LinkRepository
from linkshare.domain.repository.result import (
    ConstraintKind,
    UnhandledConstraintViolation,
    WriteResult,
    WriteStatus,
)
from linkshare.domain.repository.user import UserRepository
from linkshare.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "LinkRepository",
    "CommentRepository",
    "VoteRepository",
    "WriteResult",
    "WriteStatus",
    "ConstraintKind",
    "UnhandledConstraintViolation",
]
