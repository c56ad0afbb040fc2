"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from reel.domain.service import CommentService, ThreadService, UserService
from reel.domain.value import CommentId, ThreadId, UserId

from .common import CommentItem, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    thread_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Top-level comment ID for replies
    reply_to_id: str | None = None  # Comment the reply answers


class CreateCommentUseCase:
    """Use case for commenting on a thread or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            thread_service: Thread domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Verify thread exists via thread service
        2. Verify author exists via user service
        3. Create comment via comment service (validates reply references)

        Args:
            request: Create comment request

        Returns:
            Created comment with its author

        Raises:
            NotFoundError: If thread or author not found
            ValidationError: If content is blank or reply references are invalid
        """
        thread_id = ThreadId(UUID(request.thread_id))
        author_id = UserId(UUID(request.author_id))

        await self.thread_service.get_thread(thread_id)
        await self.user_service.get_by_id(author_id)

        comment = await self.comment_service.create_comment(
            thread_id=thread_id,
            author_id=author_id,
            content=request.content,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            reply_to_id=(
                CommentId(UUID(request.reply_to_id)) if request.reply_to_id else None
            ),
        )

        return to_comment_item(comment)
