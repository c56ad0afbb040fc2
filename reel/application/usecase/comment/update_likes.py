"""Update likes use case."""

from uuid import UUID

from pydantic import BaseModel

from reel.domain.service import CommentService
from reel.domain.value import CommentId


class UpdateLikesRequest(BaseModel):
    """Update likes request."""

    comment_id: str  # UUID string
    increment: bool  # True to like, False to unlike


class UpdateLikesResponse(BaseModel):
    """Update likes response."""

    comment_id: str
    likes: int


class UpdateLikesUseCase:
    """Use case for liking or unliking a comment.

    Likes are a raw counter with no per-user tracking, so any
    authenticated user may call this repeatedly.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateLikesRequest) -> UpdateLikesResponse:
        comment_id = CommentId(UUID(request.comment_id))

        updated = await self.comment_service.update_likes(
            comment_id, request.increment
        )

        return UpdateLikesResponse(comment_id=str(updated.id), likes=updated.likes)
