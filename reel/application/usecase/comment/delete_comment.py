"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from reel.domain.error import NotAuthorizedError
from reel.domain.service import CommentService
from reel.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase:
    """Use case for deleting a comment and, for top-level ones, its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If user doesn't own the comment
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.require_comment(comment_id)
        if comment.author_id != user_id:
            raise NotAuthorizedError(
                "comment", request.comment_id, request.user_id, "delete"
            )

        await self.comment_service.delete_comment(comment_id)

        return DeleteCommentResponse(comment_id=request.comment_id, deleted=True)
