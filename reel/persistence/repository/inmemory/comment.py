"""In-memory comment repository for testing."""

from typing import Optional

from reel.domain.error import NotFoundError
from reel.domain.model.comment import Comment
from reel.domain.repository.comment import CommentRepository
from reel.domain.value import CommentId, ThreadId, UserId
from reel.domain.value.types import ReplyToSummary, ThreadSummary

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the PostgreSQL schema's behaviour: replies cascade with their
    parent, reply_to pointers are nulled when their target goes away, and
    like updates never yield to the event loop between read and write.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    # ------------------------------------------------------------------
    # Projections (the joins of the SQL implementation)
    # ------------------------------------------------------------------

    def _with_author(self, comment: Comment, **extra) -> Comment:
        author = self._store.users.get(comment.author_id)
        return comment.model_copy(
            update={"author": author.to_summary() if author else None, **extra}
        )

    def _reply_count(self, comment_id: CommentId) -> int:
        return sum(1 for c in self._store.comments.values() if c.parent_id == comment_id)

    def _thread_summary(self, thread_id: ThreadId) -> ThreadSummary | None:
        thread = self._store.threads.get(thread_id)
        if thread is None:
            return None
        return ThreadSummary(thread_id=thread.id, title=thread.title)

    def _reply_to_summary(self, reply_to_id: CommentId | None) -> ReplyToSummary | None:
        if reply_to_id is None:
            return None
        target = self._store.comments.get(reply_to_id)
        if target is None:
            return None
        author = self._store.users.get(target.author_id)
        if author is None:
            return None
        return ReplyToSummary(comment_id=target.id, author=author.to_summary())

    def _newest_first(self, comments: list[Comment]) -> list[Comment]:
        return sorted(
            comments,
            key=lambda c: (c.created_at, self._store.comment_sequence.get(c.id, 0)),
            reverse=True,
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._store.comments.get(comment_id)
        return self._with_author(comment) if comment else None

    async def find_by_thread(self, thread_id: ThreadId) -> list[Comment]:
        """Find the top-level comments of a thread, newest first."""
        comments = [
            c
            for c in self._store.comments.values()
            if c.thread_id == thread_id and c.parent_id is None
        ]
        return [
            self._with_author(c, reply_count=self._reply_count(c.id))
            for c in self._newest_first(comments)
        ]

    async def find_by_author(self, author_id: UserId) -> list[Comment]:
        """Find all comments by an author, newest first."""
        comments = [c for c in self._store.comments.values() if c.author_id == author_id]
        return [
            self._with_author(
                c,
                reply_count=self._reply_count(c.id),
                thread=self._thread_summary(c.thread_id),
            )
            for c in self._newest_first(comments)
        ]

    async def find_replies(self, comment_id: CommentId) -> list[Comment]:
        """Find the replies of a comment, newest first."""
        replies = [c for c in self._store.comments.values() if c.parent_id == comment_id]
        return [
            self._with_author(c, reply_to=self._reply_to_summary(c.reply_to_id))
            for c in self._newest_first(replies)
        ]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create(self, comment: Comment) -> Comment:
        """Insert a comment with its like counter reset to zero."""
        stored = comment.model_copy(
            update={
                "likes": 0,
                "author": None,
                "reply_count": None,
                "thread": None,
                "reply_to": None,
            }
        )
        self._store.comments[stored.id] = stored
        self._store.comment_sequence[stored.id] = self._store.next_sequence()
        return self._with_author(stored)

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        updated = comment.model_copy(update={"content": content})
        self._store.comments[comment_id] = updated
        return self._with_author(updated)

    async def delete(self, comment_id: CommentId) -> Comment:
        """Delete a comment, cascading to its replies."""
        comment = self._store.comments.pop(comment_id, None)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))

        removed = {comment_id}
        for child_id in [
            c.id for c in self._store.comments.values() if c.parent_id == comment_id
        ]:
            self._store.comments.pop(child_id)
            removed.add(child_id)
        for removed_id in removed:
            self._store.comment_sequence.pop(removed_id, None)

        # ON DELETE SET NULL for reply_to_id
        for other in list(self._store.comments.values()):
            if other.reply_to_id in removed:
                self._store.comments[other.id] = other.model_copy(
                    update={"reply_to_id": None}
                )

        return comment

    async def update_likes(self, comment_id: CommentId, increment: bool) -> Comment:
        """Add or remove one like without yielding between read and write."""
        comment = self._store.comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        likes = comment.likes + 1 if increment else max(comment.likes - 1, 0)
        updated = comment.model_copy(update={"likes": likes})
        self._store.comments[comment_id] = updated
        return updated
