"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from reel.domain.service import CommentService
from reel.domain.value import CommentId

from .common import CommentItem, to_comment_item


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentUseCase:
    """Use case for fetching a single comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.require_comment(comment_id)
        return to_comment_item(comment)
