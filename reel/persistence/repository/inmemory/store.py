"""Shared in-memory tables backing the in-memory repositories."""

from itertools import count

from reel.domain.model import Comment, Thread, User
from reel.domain.value import CommentId, ThreadId, UserId


class InMemoryStore:
    """In-memory stand-in for the database.

    One store is shared by all repositories of a container so that
    comment queries can join authors and threads the way SQL does.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.threads: dict[ThreadId, Thread] = {}
        self.comments: dict[CommentId, Comment] = {}
        # Insertion order, used to break created_at ties
        self.comment_sequence: dict[CommentId, int] = {}
        self._counter = count()

    def next_sequence(self) -> int:
        """Return the next insertion sequence number."""
        return next(self._counter)
