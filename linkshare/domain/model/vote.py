"""Vote entity.

Each user can vote for a given link at most once, permanently.
"""

from linkshare.domain.model.common import DomainModel
from linkshare.domain.value import LinkId, UserId, VoteId


class Vote(DomainModel):
    """Vote by a user for a link.

    Business rules:
    - One vote per (user, link) pair (enforced by database unique constraint)
    - Votes are never retracted
    """

    id: VoteId
    user_id: UserId
    link_id: LinkId
