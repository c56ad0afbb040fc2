"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM mapping.

Comment queries add joined columns under fixed labels (see
``reel.persistence.repository.comment``); the mapper picks up whichever
projections are present in the row.
"""

from typing import Any, Dict
from uuid import UUID

from reel.domain.model import Comment, Thread, User
from reel.domain.value import CommentId, MovieId, ThreadId, UserId
from reel.domain.value.types import (
    AuthorSummary,
    ReplyToSummary,
    ThreadSummary,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        likes=row["likes"],
        creator_id=UserId(_uuid(row["creator_id"])),
        movie_id=MovieId(_uuid(row["movie_id"])),
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict."""
    return thread.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict, optionally carrying the labelled
            author_*, thread_*, reply_to_* and reply_count columns

    Returns:
        Comment domain model
    """
    author = None
    if row.get("author_username") is not None:
        author = AuthorSummary(
            user_id=UserId(_uuid(row["author_id"])),
            username=Username(row["author_username"]),
        )

    thread = None
    if row.get("thread_title") is not None:
        thread = ThreadSummary(
            thread_id=ThreadId(_uuid(row["thread_id"])),
            title=row["thread_title"],
        )

    reply_to = None
    if row.get("reply_to_comment_id") is not None:
        reply_to = ReplyToSummary(
            comment_id=CommentId(_uuid(row["reply_to_comment_id"])),
            author=AuthorSummary(
                user_id=UserId(_uuid(row["reply_to_author_id"])),
                username=Username(row["reply_to_author_username"]),
            ),
        )

    return Comment(
        id=CommentId(_uuid(row["id"])),
        thread_id=ThreadId(_uuid(row["thread_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        likes=row["likes"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        reply_to_id=CommentId(_uuid(row["reply_to_id"]))
        if row.get("reply_to_id")
        else None,
        created_at=row["created_at"],
        author=author,
        reply_count=row.get("reply_count"),
        thread=thread,
        reply_to=reply_to,
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Read projections are not columns and are left out.
    """
    return comment.model_dump(
        exclude={"author", "reply_count", "thread", "reply_to"}
    )
