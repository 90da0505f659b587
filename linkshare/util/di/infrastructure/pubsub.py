"""Event bus provider."""

from collections.abc import Iterator

from dishka import Scope, provide

from linkshare.adapter.pubsub import EventBus
from linkshare.config import EventBusSettings
from linkshare.util.di.base import ProviderBase


class PubSubProvider(ProviderBase):
    """Single event bus shared by every request and subscription."""

    scope = Scope.APP

    @provide
    def get_event_bus(self, settings: EventBusSettings) -> Iterator[EventBus]:
        """Provide the event bus, closed when the container closes."""
        bus = EventBus(subscriber_queue_size=settings.subscriber_queue_size)
        yield bus
        bus.close()
