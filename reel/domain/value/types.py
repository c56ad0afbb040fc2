"""Domain value objects for Reel Talk.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and the read projections embedded in
comments (author, thread and reply-to summaries).
"""

from pydantic import field_validator

from reel.domain.value.common import RootValueObject, ValueObject
from reel.domain.value.identifiers import CommentId, ThreadId, UserId


class Username(RootValueObject[str]):
    """Display name of a user, shown on comment and reply cards."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class AuthorSummary(ValueObject):
    """Minimal author projection embedded in comments."""

    user_id: UserId
    username: Username


class ThreadSummary(ValueObject):
    """Minimal thread projection embedded in an author's comment list."""

    thread_id: ThreadId
    title: str


class ReplyToSummary(ValueObject):
    """Who a reply is directed at.

    Used for display attribution only; the reply still lives in its
    parent's bucket regardless of this pointer.
    """

    comment_id: CommentId
    author: AuthorSummary
