"""Comment entity."""

from linkshare.domain.model.common import DomainModel
from linkshare.domain.value import CommentId, LinkId


class Comment(DomainModel):
    """Comment on a link.

    A comment cannot exist without its link (enforced by foreign key).
    """

    id: CommentId
    body: str
    link_id: LinkId
