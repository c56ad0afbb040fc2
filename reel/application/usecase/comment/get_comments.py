"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from reel.domain.service import CommentService
from reel.domain.value import ThreadId

from .common import CommentItem, to_comment_item


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    thread_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    thread_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for listing the top-level comments of a thread."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Replies are not included; each comment carries its reply_count
        so the caller can decide whether to fetch them.

        Args:
            request: Get comments request with thread ID

        Returns:
            Top-level comments, newest first
        """
        thread_id = ThreadId(UUID(request.thread_id))

        comments = await self.comment_service.get_comments_for_thread(thread_id)

        return GetCommentsResponse(
            thread_id=request.thread_id,
            comments=[to_comment_item(comment) for comment in comments],
            total=len(comments),
        )
