"""Cast vote use case."""

from pydantic import BaseModel

from linkshare.adapter.pubsub import EventBus
from linkshare.application.usecase.base import BaseUseCase
from linkshare.domain.model import Event, Vote
from linkshare.domain.service import VoteService
from linkshare.domain.value import Topic, UserId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    link_id: str  # Raw id as supplied by the client
    user_id: UserId  # ID of the authenticated caller


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a link and announcing the vote."""

    def __init__(self, vote_service: VoteService, event_bus: EventBus) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            event_bus: Bus carrying newVote events
        """
        self.vote_service = vote_service
        self.event_bus = event_bus

    async def execute(self, request: CastVoteRequest) -> Vote:
        """Cast the vote, then publish it on ``newVote``.

        Nothing is published when the vote is rejected.

        Raises:
            AlreadyVotedError: If the user already voted for the link
            LinkNotFoundError: If the link id is malformed or unknown
        """
        vote = await self.vote_service.cast_vote(
            user_id=request.user_id, raw_link_id=request.link_id
        )
        self.event_bus.publish(Topic.NEW_VOTE, Event.new_vote(vote))
        return vote
