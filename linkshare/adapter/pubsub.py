"""In-process publish/subscribe event bus.

Subscribers register interest in a topic and receive every event published
on it while their subscription is open. Delivery is fire-and-forget: events
are not stored, not replayed to late subscribers, and dropped for a
subscriber whose queue is full.

Usage:
    bus = EventBus()

    async for event in bus.listen(Topic.NEW_LINK):
        ...

    bus.publish(Topic.NEW_LINK, Event.new_link(link))
"""

import asyncio
import threading
from collections import defaultdict
from typing import AsyncIterator, Optional

from linkshare.adapter.error import EventBusClosedError
from linkshare.domain.model.event import Event
from linkshare.domain.value import Topic
from linkshare.util.logging import get_logger

logger = get_logger(__name__)

_CLOSED = object()


class Subscription:
    """One subscriber's stream of events for a topic.

    Iterating yields events until the subscription is closed; the stream
    never ends on its own. Closing is idempotent and safe from any task.
    """

    def __init__(
        self,
        bus: "EventBus",
        topic: Topic,
        queue_size: int,
        loop: asyncio.AbstractEventLoop,
    ) -> None:
        self.topic = topic
        self._bus = bus
        self._loop = loop
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=queue_size)
        self._closed = False
        self.dropped = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Unregister from the bus and stop delivery."""
        if self._closed:
            return
        self._closed = True
        self._bus._unregister(self)
        self._schedule(self._wake)

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> Event:
        if self._closed and self._queue.empty():
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED or self._closed:
            raise StopAsyncIteration
        return item

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()

    def deliver(self, event: Event) -> None:
        """Offer an event from any thread without blocking."""
        if self._closed:
            return
        self._schedule(self._offer, event)

    def _schedule(self, callback, *args) -> None:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is self._loop:
            callback(*args)
            return

        try:
            self._loop.call_soon_threadsafe(callback, *args)
        except RuntimeError:
            # Owning loop is closed; nobody can consume this subscription
            self._closed = True
            self._bus._unregister(self)

    def _offer(self, event: Event) -> None:
        if self._closed:
            return
        try:
            self._queue.put_nowait(event)
        except asyncio.QueueFull:
            self.dropped += 1
            logger.warning(
                "Dropping %s event for slow subscriber (dropped=%d)",
                self.topic.value,
                self.dropped,
            )

    def _wake(self) -> None:
        # A full queue means the consumer is not waiting; it sees _closed next
        try:
            self._queue.put_nowait(_CLOSED)
        except asyncio.QueueFull:
            pass


class EventBus:
    """Topic-addressed fan-out to all open subscriptions.

    The subscriber registry is the only shared mutable state and is guarded
    by a lock, so publishing and (un)subscribing are safe from concurrent
    tasks and threads.
    """

    def __init__(self, subscriber_queue_size: int = 100) -> None:
        self._queue_size = subscriber_queue_size
        self._subscribers: dict[Topic, list[Subscription]] = defaultdict(list)
        self._lock = threading.Lock()
        self._closed = False

    def subscribe(self, topic: Topic) -> Subscription:
        """Open a new subscription on a topic.

        Must be called from the event loop that will consume the stream.

        Raises:
            EventBusClosedError: If the bus has been closed
        """
        subscription = Subscription(
            self, topic, self._queue_size, asyncio.get_running_loop()
        )
        with self._lock:
            if self._closed:
                raise EventBusClosedError("Event bus is closed")
            self._subscribers[topic].append(subscription)
            count = len(self._subscribers[topic])
        logger.debug("Subscribed to %s (subscribers=%d)", topic.value, count)
        return subscription

    async def listen(self, topic: Topic) -> AsyncIterator[Event]:
        """Yield events for a topic until the consumer stops iterating.

        The subscription is released when the generator is closed or
        cancelled, e.g. when a WebSocket client disconnects.
        """
        subscription = self.subscribe(topic)
        try:
            async for event in subscription:
                yield event
        finally:
            subscription.close()

    def publish(self, topic: Topic, event: Event) -> int:
        """Deliver an event to every open subscription on the topic.

        Never blocks; subscribers that cannot keep up miss the event.

        Returns:
            Number of subscriptions the event was offered to

        Raises:
            ValueError: If the event was built for a different topic
        """
        if event.topic is not topic:
            raise ValueError(
                f"Event for {event.topic.value} published on {topic.value}"
            )

        with self._lock:
            targets = tuple(self._subscribers.get(topic, ()))

        for subscription in targets:
            subscription.deliver(event)

        logger.debug("Published %s to %d subscribers", topic.value, len(targets))
        return len(targets)

    def subscriber_count(self, topic: Optional[Topic] = None) -> int:
        """Number of open subscriptions, for one topic or overall."""
        with self._lock:
            if topic is not None:
                return len(self._subscribers.get(topic, ()))
            return sum(len(subs) for subs in self._subscribers.values())

    def close(self) -> None:
        """Close every subscription and refuse new ones."""
        with self._lock:
            self._closed = True
            subscriptions = [s for subs in self._subscribers.values() for s in subs]
        for subscription in subscriptions:
            subscription.close()
        logger.info("Event bus closed (%d subscriptions released)", len(subscriptions))

    def _unregister(self, subscription: Subscription) -> None:
        with self._lock:
            subscribers = self._subscribers.get(subscription.topic)
            if subscribers and subscription in subscribers:
                subscribers.remove(subscription)
