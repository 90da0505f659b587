"""Unit tests for the in-process EventBus."""

import asyncio
import threading
from datetime import datetime, timezone

import pytest

from linkshare.adapter.error import EventBusClosedError
from linkshare.adapter.pubsub import EventBus
from linkshare.domain.model import Event, Link, Vote
from linkshare.domain.value import LinkId, Topic, UserId, VoteId


def make_link(link_id: int = 1) -> Link:
    return Link(
        id=LinkId(link_id),
        url=f"https://example.com/{link_id}",
        description=f"Link {link_id}",
        created_at=datetime.now(timezone.utc),
        author_id=None,
    )


def make_vote(vote_id: int = 1) -> Vote:
    return Vote(id=VoteId(vote_id), user_id=UserId(1), link_id=LinkId(1))


class TestPublishSubscribe:
    """Fan-out to open subscriptions."""

    @pytest.mark.asyncio
    async def test_every_subscriber_receives_event_once(self):
        """Two subscribers each get the published event exactly once."""
        bus = EventBus()
        first = bus.subscribe(Topic.NEW_LINK)
        second = bus.subscribe(Topic.NEW_LINK)
        event = Event.new_link(make_link())

        delivered = bus.publish(Topic.NEW_LINK, event)

        assert delivered == 2
        assert await asyncio.wait_for(first.__anext__(), 1) == event
        assert await asyncio.wait_for(second.__anext__(), 1) == event
        assert first._queue.empty()
        assert second._queue.empty()

    @pytest.mark.asyncio
    async def test_topics_are_isolated(self):
        """A newVote subscriber never sees newLink events."""
        bus = EventBus()
        votes = bus.subscribe(Topic.NEW_VOTE)

        delivered = bus.publish(Topic.NEW_LINK, Event.new_link(make_link()))

        assert delivered == 0
        assert votes._queue.empty()

    @pytest.mark.asyncio
    async def test_late_subscriber_gets_no_replay(self):
        """Events published before subscribing are not delivered."""
        bus = EventBus()
        bus.publish(Topic.NEW_LINK, Event.new_link(make_link(1)))

        subscription = bus.subscribe(Topic.NEW_LINK)
        bus.publish(Topic.NEW_LINK, Event.new_link(make_link(2)))

        event = await asyncio.wait_for(subscription.__anext__(), 1)
        assert event.payload.id == 2

    @pytest.mark.asyncio
    async def test_publish_without_subscribers_is_noop(self):
        bus = EventBus()
        assert bus.publish(Topic.NEW_VOTE, Event.new_vote(make_vote())) == 0

    @pytest.mark.asyncio
    async def test_publish_rejects_topic_mismatch(self):
        """An event built for newVote cannot be published on newLink."""
        bus = EventBus()
        with pytest.raises(ValueError):
            bus.publish(Topic.NEW_LINK, Event.new_vote(make_vote()))

    @pytest.mark.asyncio
    async def test_events_arrive_in_publish_order(self):
        bus = EventBus()
        subscription = bus.subscribe(Topic.NEW_LINK)
        for link_id in (1, 2, 3):
            bus.publish(Topic.NEW_LINK, Event.new_link(make_link(link_id)))

        received = [
            (await asyncio.wait_for(subscription.__anext__(), 1)).payload.id
            for _ in range(3)
        ]
        assert received == [1, 2, 3]


class TestBackpressure:
    """Slow subscribers lose events without blocking the publisher."""

    @pytest.mark.asyncio
    async def test_full_queue_drops_event_for_that_subscriber_only(self):
        bus = EventBus(subscriber_queue_size=1)
        slow = bus.subscribe(Topic.NEW_LINK)
        fast = bus.subscribe(Topic.NEW_LINK)

        bus.publish(Topic.NEW_LINK, Event.new_link(make_link(1)))
        assert (await fast.__anext__()).payload.id == 1

        bus.publish(Topic.NEW_LINK, Event.new_link(make_link(2)))

        assert slow.dropped == 1
        assert fast.dropped == 0
        assert (await slow.__anext__()).payload.id == 1
        assert (await fast.__anext__()).payload.id == 2


class TestSubscriptionLifecycle:
    """Closing and unsubscribing."""

    @pytest.mark.asyncio
    async def test_close_unregisters_and_ends_iteration(self):
        bus = EventBus()
        subscription = bus.subscribe(Topic.NEW_LINK)
        assert bus.subscriber_count(Topic.NEW_LINK) == 1

        subscription.close()

        assert bus.subscriber_count(Topic.NEW_LINK) == 0
        with pytest.raises(StopAsyncIteration):
            await asyncio.wait_for(subscription.__anext__(), 1)

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        bus = EventBus()
        subscription = bus.subscribe(Topic.NEW_LINK)
        subscription.close()
        subscription.close()
        assert subscription.closed

    @pytest.mark.asyncio
    async def test_close_wakes_waiting_consumer(self):
        bus = EventBus()
        subscription = bus.subscribe(Topic.NEW_VOTE)

        async def consume():
            return [event async for event in subscription]

        consumer = asyncio.create_task(consume())
        await asyncio.sleep(0)
        subscription.close()

        assert await asyncio.wait_for(consumer, 1) == []

    @pytest.mark.asyncio
    async def test_context_manager_closes_subscription(self):
        bus = EventBus()
        async with bus.subscribe(Topic.NEW_LINK):
            assert bus.subscriber_count() == 1
        assert bus.subscriber_count() == 0

    @pytest.mark.asyncio
    async def test_listen_releases_subscription_when_closed(self):
        """Closing the generator (client disconnect) unsubscribes."""
        bus = EventBus()
        stream = bus.listen(Topic.NEW_LINK)

        next_event = asyncio.create_task(stream.__anext__())
        while bus.subscriber_count(Topic.NEW_LINK) == 0:
            await asyncio.sleep(0)

        bus.publish(Topic.NEW_LINK, Event.new_link(make_link()))
        event = await asyncio.wait_for(next_event, 1)
        assert event.topic is Topic.NEW_LINK

        await stream.aclose()
        assert bus.subscriber_count(Topic.NEW_LINK) == 0

    @pytest.mark.asyncio
    async def test_closed_bus_rejects_new_subscriptions(self):
        bus = EventBus()
        existing = bus.subscribe(Topic.NEW_LINK)

        bus.close()

        assert existing.closed
        assert bus.subscriber_count() == 0
        with pytest.raises(EventBusClosedError):
            bus.subscribe(Topic.NEW_LINK)


class TestThreadSafety:
    """Publishing from other threads."""

    @pytest.mark.asyncio
    async def test_publish_from_worker_thread_reaches_loop_subscriber(self):
        bus = EventBus()
        subscription = bus.subscribe(Topic.NEW_LINK)
        event = Event.new_link(make_link())

        thread = threading.Thread(target=bus.publish, args=(Topic.NEW_LINK, event))
        thread.start()
        thread.join()

        assert await asyncio.wait_for(subscription.__anext__(), 1) == event

    @pytest.mark.asyncio
    async def test_concurrent_subscribe_and_publish(self):
        """Registry stays consistent under concurrent publishers."""
        bus = EventBus(subscriber_queue_size=1000)
        subscriptions = [bus.subscribe(Topic.NEW_VOTE) for _ in range(5)]

        def publish_many():
            for vote_id in range(50):
                bus.publish(Topic.NEW_VOTE, Event.new_vote(make_vote(vote_id + 1)))

        threads = [threading.Thread(target=publish_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Let the loop run the callbacks scheduled from the threads
        for _ in range(10):
            await asyncio.sleep(0)

        for subscription in subscriptions:
            assert subscription._queue.qsize() == 200
