"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from reel.domain.model.comment import Comment
from reel.domain.value import CommentId, ThreadId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    All list queries return newest first (descending created_at).
    Storage failures propagate unmodified.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment with its author summary if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        """Find the top-level comments of a thread.

        Replies are never included.

        Args:
            thread_id: The thread ID

        Returns:
            Top-level comments with author and reply_count, newest first
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find every comment written by an author, across threads.

        Args:
            author_id: The author's user ID

        Returns:
            Comments with author, thread summary and reply_count, newest first
        """
        pass

    @abstractmethod
    async def find_replies(self, comment_id: CommentId) -> List[Comment]:
        """Find the replies whose parent is the given comment.

        Args:
            comment_id: The parent comment ID

        Returns:
            Replies with author and reply_to attribution, newest first
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        The like counter always starts at zero, whatever the caller set.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment including its author summary
        """
        pass

    @abstractmethod
    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment including its author summary

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> Comment:
        """Delete a comment (hard delete).

        Replies of a top-level comment are removed with it, and replies
        attributed to the deleted comment lose their reply_to pointer.

        Args:
            comment_id: The comment ID to delete

        Returns:
            The comment as it was before deletion

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def update_likes(self, comment_id: CommentId, increment: bool) -> Comment:
        """Atomically add or remove one like.

        Must be a single storage-level update, never read-then-write.
        A decrement at zero leaves the counter at zero.

        Args:
            comment_id: The comment ID
            increment: True to add a like, False to remove one

        Returns:
            The comment with its new like count

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass
