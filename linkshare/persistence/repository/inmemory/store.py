"""Shared in-memory storage for testing.

All in-memory repositories built from one store see the same rows, and the
store enforces the same unique and foreign key rules as the PostgreSQL
schema so constraint handling can be tested without a database.
"""

import asyncio
from itertools import count

from linkshare.domain.model import Comment, Link, User, Vote
from linkshare.domain.value import CommentId, LinkId, UserId, VoteId


class InMemoryStore:
    """Tables and id sequences backing the in-memory repositories."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.links: dict[LinkId, Link] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.votes: dict[VoteId, Vote] = {}
        self._sequences = {
            "users": count(1),
            "links": count(1),
            "comments": count(1),
            "votes": count(1),
        }

    def next_id(self, table: str) -> int:
        """Allocate the next id for a table."""
        return next(self._sequences[table])


async def checkpoint() -> None:
    """Yield to the event loop like a database round trip would.

    Finds read first and yield afterwards, so concurrent callers can all
    observe the same state before any of them writes.
    """
    await asyncio.sleep(0)
