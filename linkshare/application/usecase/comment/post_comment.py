"""Post comment use case."""

from pydantic import BaseModel

from linkshare.application.usecase.base import BaseUseCase
from linkshare.domain.model import Comment
from linkshare.domain.service import CommentService


class PostCommentRequest(BaseModel):
    """Post comment request."""

    link_id: str  # Raw id as supplied by the client
    body: str


class PostCommentUseCase(BaseUseCase):
    """Use case for commenting on a link."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize post comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: PostCommentRequest) -> Comment:
        """Execute post comment flow.

        Raises:
            LinkNotFoundError: If the link id is malformed or unknown
        """
        return await self.comment_service.create_comment(
            raw_link_id=request.link_id, body=request.body
        )
