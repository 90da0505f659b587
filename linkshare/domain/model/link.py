"""Link entity.

Links are the shared content; anyone may read them and authenticated users
post them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from linkshare.domain.model.common import DomainModel
from linkshare.domain.value import LinkId, UserId


class Link(DomainModel):
    """Shared link.

    ``author_id`` is None for links posted anonymously.
    """

    id: LinkId
    url: str
    description: str
    created_at: datetime = Field(default_factory=datetime.now)
    author_id: Optional[UserId] = None
