"""Strongly typed identifiers for LinkShare domain entities.

Identifiers are storage-assigned integers; NewType keeps them from being
mixed up in signatures.
"""

import re
from typing import NewType, Optional

UserId = NewType("UserId", int)
LinkId = NewType("LinkId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)

# ASCII digits only; \d would also accept other scripts' digits
_NUMERIC_ID = re.compile(r"[0-9]+")

# Ids are stored in 32-bit integer columns
MAX_ID = 2**31 - 1


def parse_id(value: str) -> Optional[int]:
    """Parse a client supplied identifier.

    Only plain ASCII digit strings are accepted; anything else (signs,
    whitespace including a trailing newline, letters, non-ASCII digits, an
    empty string) yields None. So does a number no stored row can have.

    Args:
        value: Raw identifier from the request

    Returns:
        The integer id, or None if the value is not a storable id
    """
    if not _NUMERIC_ID.fullmatch(value):
        return None
    parsed = int(value)
    if parsed > MAX_ID:
        return None
    return parsed
