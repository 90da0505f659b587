"""Post link use case."""

from pydantic import BaseModel

from linkshare.adapter.pubsub import EventBus
from linkshare.application.usecase.base import BaseUseCase
from linkshare.domain.model import Event, Link
from linkshare.domain.service import LinkService
from linkshare.domain.value import Topic, UserId


class PostLinkRequest(BaseModel):
    """Post link request."""

    url: str
    description: str
    author_id: UserId  # ID of the authenticated caller


class PostLinkUseCase(BaseUseCase):
    """Use case for posting a link and announcing it to subscribers."""

    def __init__(self, link_service: LinkService, event_bus: EventBus) -> None:
        """Initialize post link use case.

        Args:
            link_service: Link domain service
            event_bus: Bus carrying newLink events
        """
        self.link_service = link_service
        self.event_bus = event_bus

    async def execute(self, request: PostLinkRequest) -> Link:
        """Create the link, then publish it on ``newLink``."""
        link = await self.link_service.create_link(
            url=request.url,
            description=request.description,
            author_id=request.author_id,
        )
        self.event_bus.publish(Topic.NEW_LINK, Event.new_link(link))
        return link
