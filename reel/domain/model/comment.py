"""Comment entity.

Comments form a flattened two-level tree on a thread:
- parent_id: the top-level comment a reply belongs to (None for top-level)
- reply_to_id: which comment in that bucket a reply is directed at

The second pointer lets a reply answer another reply without the tree
growing deeper than one level.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from reel.domain.model.common import DomainModel
from reel.domain.value import CommentId, ThreadId, UserId
from reel.domain.value.types import AuthorSummary, ReplyToSummary, ThreadSummary


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a thread or a reply to one.

    The trailing optional fields are read projections filled in by the
    repository query that loaded the comment; they are never written back.
    """

    id: CommentId
    thread_id: ThreadId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    likes: int = Field(default=0, ge=0)
    parent_id: Optional[CommentId] = None
    reply_to_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    author: Optional[AuthorSummary] = None
    reply_count: Optional[int] = None
    thread: Optional[ThreadSummary] = None
    reply_to: Optional[ReplyToSummary] = None

    @property
    def is_reply(self) -> bool:
        """Whether this comment lives in a parent's reply bucket."""
        return self.parent_id is not None
