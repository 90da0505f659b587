"""Domain value objects for LinkShare."""

from linkshare.domain.value.identifiers import (
    CommentId,
    LinkId,
    UserId,
    VoteId,
    parse_id,
)
from linkshare.domain.value.types import (
    LinkFilter,
    LinkOrder,
    Page,
    SortDirection,
    Topic,
)

__all__ = [
    # Identifiers
    "UserId",
    "LinkId",
    "CommentId",
    "VoteId",
    "parse_id",
    # Types
    "LinkFilter",
    "LinkOrder",
    "Page",
    "SortDirection",
    "Topic",
]
