"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel

from reel.domain.service import CommentService
from reel.domain.value import CommentId

from .common import CommentItem, to_comment_item


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str  # UUID string of the top-level comment


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    comment_id: str
    replies: list[CommentItem]
    total: int


class GetRepliesUseCase:
    """Use case for listing the reply bucket of a top-level comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        An unknown comment simply has no replies.
        """
        comment_id = CommentId(UUID(request.comment_id))

        replies = await self.comment_service.get_replies(comment_id)

        return GetRepliesResponse(
            comment_id=request.comment_id,
            replies=[to_comment_item(reply) for reply in replies],
            total=len(replies),
        )
