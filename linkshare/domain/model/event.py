"""Events fanned out to live subscribers."""

from typing import Union

from pydantic import model_validator

from linkshare.domain.model.common import DomainModel
from linkshare.domain.model.link import Link
from linkshare.domain.model.vote import Vote
from linkshare.domain.value import Topic

_PAYLOAD_TYPES: dict[Topic, type] = {
    Topic.NEW_LINK: Link,
    Topic.NEW_VOTE: Vote,
}


class Event(DomainModel):
    """Newly created entity published on a topic.

    Events exist only while being delivered; they are not stored or replayed.
    """

    topic: Topic
    payload: Union[Link, Vote]

    @model_validator(mode="after")
    def validate_payload_matches_topic(self) -> "Event":
        """newLink carries a Link, newVote carries a Vote."""
        expected = _PAYLOAD_TYPES[self.topic]
        if not isinstance(self.payload, expected):
            raise ValueError(
                f"Topic {self.topic.value} expects a {expected.__name__} payload"
            )
        return self

    @classmethod
    def new_link(cls, link: Link) -> "Event":
        return cls(topic=Topic.NEW_LINK, payload=link)

    @classmethod
    def new_vote(cls, vote: Vote) -> "Event":
        return cls(topic=Topic.NEW_VOTE, payload=vote)
