"""Response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from reel.domain.model import Comment


class AuthorItem(BaseModel):
    """Author of a comment."""

    user_id: str
    username: str


class ThreadSummaryItem(BaseModel):
    """Thread a comment was posted on."""

    thread_id: str
    title: str


class ReplyToItem(BaseModel):
    """Comment a reply is directed at."""

    comment_id: str
    author: AuthorItem


class CommentItem(BaseModel):
    """Comment item in response.

    The projection fields are only present where the originating query
    provides them: reply_count on thread and author listings, thread on
    author listings and reply_to on reply listings.
    """

    comment_id: str
    thread_id: str
    author_id: str
    content: str
    likes: int
    parent_id: str | None = None
    reply_to_id: str | None = None
    created_at: datetime
    author: AuthorItem | None = None
    reply_count: int | None = None
    thread: ThreadSummaryItem | None = None
    reply_to: ReplyToItem | None = None


def to_comment_item(comment: Comment) -> CommentItem:
    """Convert a comment entity to its response item."""
    author = (
        AuthorItem(
            user_id=str(comment.author.user_id),
            username=comment.author.username.root,
        )
        if comment.author
        else None
    )
    thread = (
        ThreadSummaryItem(
            thread_id=str(comment.thread.thread_id), title=comment.thread.title
        )
        if comment.thread
        else None
    )
    reply_to = (
        ReplyToItem(
            comment_id=str(comment.reply_to.comment_id),
            author=AuthorItem(
                user_id=str(comment.reply_to.author.user_id),
                username=comment.reply_to.author.username.root,
            ),
        )
        if comment.reply_to
        else None
    )

    return CommentItem(
        comment_id=str(comment.id),
        thread_id=str(comment.thread_id),
        author_id=str(comment.author_id),
        content=comment.content,
        likes=comment.likes,
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        reply_to_id=str(comment.reply_to_id) if comment.reply_to_id else None,
        created_at=comment.created_at,
        author=author,
        reply_count=comment.reply_count,
        thread=thread,
        reply_to=reply_to,
    )
