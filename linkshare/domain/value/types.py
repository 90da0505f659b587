"""Domain value objects for LinkShare."""

from enum import Enum
from typing import Optional

from pydantic import field_validator

from linkshare.domain.value.common import ValueObject


class Topic(str, Enum):
    """Event bus topics."""

    NEW_LINK = "newLink"
    NEW_VOTE = "newVote"


class SortDirection(str, Enum):
    """Sort direction for ordered listings."""

    ASC = "asc"
    DESC = "desc"


class LinkOrder(ValueObject):
    """Ordering for link listings.

    Fields are applied in priority order: description, url, created_at.
    Unset fields do not participate in the ordering.
    """

    description: Optional[SortDirection] = None
    url: Optional[SortDirection] = None
    created_at: Optional[SortDirection] = None

    def clauses(self) -> list[tuple[str, SortDirection]]:
        """Return the (field, direction) pairs that are set, in priority order."""
        return [
            (field, direction)
            for field, direction in (
                ("description", self.description),
                ("url", self.url),
                ("created_at", self.created_at),
            )
            if direction is not None
        ]


class LinkFilter(ValueObject):
    """Substring filter for link listings.

    Matches links whose description OR url contains the needle.
    """

    needle: str

    @field_validator("needle")
    @classmethod
    def validate_needle(cls, v: str) -> str:
        """Reject empty needles; callers skip filtering instead."""
        if not v:
            raise ValueError("Filter needle must not be empty")
        return v

    def matches(self, description: str, url: str) -> bool:
        """Check a link's text fields against the needle."""
        return self.needle in description or self.needle in url


class Page(ValueObject):
    """Validated skip/take window."""

    skip: int = 0
    take: int
