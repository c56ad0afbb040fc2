"""Get author comments use case."""

from uuid import UUID

from pydantic import BaseModel

from reel.domain.service import CommentService
from reel.domain.value import UserId

from .common import CommentItem, to_comment_item


class GetAuthorCommentsRequest(BaseModel):
    """Get author comments request."""

    user_id: str  # UUID string


class GetAuthorCommentsResponse(BaseModel):
    """Get author comments response."""

    user_id: str
    comments: list[CommentItem]
    total: int


class GetAuthorCommentsUseCase:
    """Use case for listing every comment a user has written."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: GetAuthorCommentsRequest
    ) -> GetAuthorCommentsResponse:
        """Execute get author comments flow.

        Each comment carries the summary of the thread it was posted on.
        """
        user_id = UserId(UUID(request.user_id))

        comments = await self.comment_service.get_comments_by_author(user_id)

        return GetAuthorCommentsResponse(
            user_id=request.user_id,
            comments=[to_comment_item(comment) for comment in comments],
            total=len(comments),
        )
