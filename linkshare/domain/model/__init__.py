"""Domain model entities for LinkShare."""

from linkshare.domain.model.caller import ResolvedCaller
from linkshare.domain.model.comment import Comment
from linkshare.domain.model.event import Event
from linkshare.domain.model.link import Link
from linkshare.domain.model.user import User
from linkshare.domain.model.vote import Vote

__all__ = [
    "User",
    "Link",
    "Comment",
    "Vote",
    "ResolvedCaller",
    "Event",
]
