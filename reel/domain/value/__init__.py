"""Domain value objects for Reel Talk."""

from reel.domain.value.identifiers import (
    CommentId,
    MovieId,
    ThreadId,
    UserId,
)
from reel.domain.value.types import (
    AuthorSummary,
    ReplyToSummary,
    ThreadSummary,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "MovieId",
    "ThreadId",
    "CommentId",
    # Types
    "Username",
    "AuthorSummary",
    "ThreadSummary",
    "ReplyToSummary",
]
