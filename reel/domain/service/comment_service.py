"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from reel.domain.error import NotFoundError, ValidationError
from reel.domain.model.comment import Comment
from reel.domain.repository import CommentRepository
from reel.domain.value import CommentId, ThreadId, UserId

from .base import Service

MAX_CONTENT_LENGTH = 10000


def normalize_content(content: str) -> str:
    """Trim comment content and check it is usable.

    Args:
        content: Raw content from the caller

    Returns:
        Trimmed content

    Raises:
        ValidationError: If content is blank or too long
    """
    trimmed = content.strip()
    if not trimmed:
        raise ValidationError("Comment content must not be empty")
    if len(trimmed) > MAX_CONTENT_LENGTH:
        raise ValidationError(
            f"Comment content must be at most {MAX_CONTENT_LENGTH} characters"
        )
    return trimmed


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        thread_id: ThreadId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
        reply_to_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment on a thread or a reply to one.

        Replies are always flattened one level below their top-level
        parent. reply_to_id only records who is being answered: it must
        point at the parent itself or at a sibling reply.

        Args:
            thread_id: Thread ID
            author_id: Author user ID
            content: Comment content
            parent_id: Top-level comment ID for replies (None for top-level)
            reply_to_id: Comment the reply is directed at

        Returns:
            Created comment including its author summary

        Raises:
            ValidationError: If content is blank or the reply references are invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            thread_id=str(thread_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
            reply_to_id=str(reply_to_id) if reply_to_id else None,
        ):
            content = normalize_content(content)

            if reply_to_id and not parent_id:
                raise ValidationError("reply_to_id requires parent_id")

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        thread_id=str(thread_id),
                    )
                    raise ValidationError("Parent comment not found")
                if parent.thread_id != thread_id:
                    logfire.warn(
                        "Parent comment does not belong to thread",
                        parent_id=str(parent_id),
                        parent_thread_id=str(parent.thread_id),
                        target_thread_id=str(thread_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this thread"
                    )
                if parent.parent_id is not None:
                    raise ValidationError(
                        "Replies can only be attached to top-level comments"
                    )

            if reply_to_id and reply_to_id != parent_id:
                target = await self.comment_repository.find_by_id(reply_to_id)
                if not target or target.parent_id != parent_id:
                    logfire.warn(
                        "Reply target is not in the parent's replies",
                        reply_to_id=str(reply_to_id),
                        parent_id=str(parent_id),
                    )
                    raise ValidationError(
                        "Reply target must be the parent comment or one of its replies"
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                thread_id=thread_id,
                author_id=author_id,
                content=content,
                likes=0,
                parent_id=parent_id,
                reply_to_id=reply_to_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                thread_id=str(thread_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comments_for_thread(self, thread_id: ThreadId) -> list[Comment]:
        """Get the top-level comments of a thread, newest first.

        Args:
            thread_id: Thread ID

        Returns:
            Top-level comments with reply counts
        """
        with logfire.span(
            "comment_service.get_comments_for_thread", thread_id=str(thread_id)
        ):
            comments = await self.comment_repository.find_by_thread(thread_id)
            logfire.info(
                "Comments retrieved for thread",
                thread_id=str(thread_id),
                count=len(comments),
            )
            return comments

    async def get_replies(self, comment_id: CommentId) -> list[Comment]:
        """Get the replies of a comment, newest first.

        Args:
            comment_id: Parent comment ID

        Returns:
            Replies with reply-to attribution
        """
        with logfire.span("comment_service.get_replies", comment_id=str(comment_id)):
            replies = await self.comment_repository.find_replies(comment_id)
            logfire.info(
                "Replies retrieved for comment",
                comment_id=str(comment_id),
                count=len(replies),
            )
            return replies

    async def get_comments_by_author(self, author_id: UserId) -> list[Comment]:
        """Get every comment written by a user, newest first.

        Args:
            author_id: Author user ID

        Returns:
            Comments with thread summaries
        """
        with logfire.span(
            "comment_service.get_comments_by_author", author_id=str(author_id)
        ):
            comments = await self.comment_repository.find_by_author(author_id)
            logfire.info(
                "Comments retrieved for author",
                author_id=str(author_id),
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def require_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or fail.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            content = normalize_content(content)
            updated = await self.comment_repository.update_content(
                comment_id, content
            )
            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                thread_id=str(updated.thread_id),
                content_length=len(updated.content),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> Comment:
        """Delete a comment.

        Deleting a top-level comment removes its replies too.

        Args:
            comment_id: Comment ID

        Returns:
            The comment as it was before deletion

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                thread_id=str(deleted.thread_id),
                was_reply=deleted.is_reply,
            )
            return deleted

    async def update_likes(self, comment_id: CommentId, increment: bool) -> Comment:
        """Atomically add or remove one like.

        Uses a SQL-level increment to avoid lost updates under concurrent likes.
        Likes are a raw counter: repeated calls keep counting.

        Args:
            comment_id: Comment ID
            increment: True to like, False to unlike

        Returns:
            Comment with its new like count

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.update_likes",
            comment_id=str(comment_id),
            increment=increment,
        ):
            updated = await self.comment_repository.update_likes(comment_id, increment)
            logfire.info(
                "Comment likes updated",
                comment_id=str(comment_id),
                likes=updated.likes,
            )
            return updated
