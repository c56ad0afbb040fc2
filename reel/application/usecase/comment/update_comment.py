"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from reel.domain.error import NotAuthorizedError
from reel.domain.service import CommentService
from reel.domain.value import CommentId, UserId

from .common import CommentItem, to_comment_item


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str  # New content (required, cannot be blank)


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID and new content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If user doesn't own the comment
            ValidationError: If the new content is blank
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        # 1. Retrieve existing comment
        comment = await self.comment_service.require_comment(comment_id)

        # 2. Check authorization (user owns comment)
        if comment.author_id != user_id:
            raise NotAuthorizedError(
                "comment", request.comment_id, request.user_id, "edit"
            )

        # 3. Update via service
        updated = await self.comment_service.update_content(
            comment_id, request.content
        )

        return to_comment_item(updated)
