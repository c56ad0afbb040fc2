"""Presentation view-models for comment and reply cards.

A card holds everything a view needs to render one comment: display
strings, the owner check and the async actions wired to the page
controller. Cards know nothing about how they are drawn.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable

from reel.application.usecase.comment import AuthorItem, CommentItem

UNKNOWN_AUTHOR = "Unknown"
TIME_FORMAT = "%Y/%m/%d %H:%M"

Action = Callable[[], Awaitable[None]]
LikeAction = Callable[[bool], Awaitable[None]]
# Points the reply box at this card; no request is sent
ReplyAction = Callable[[], None]


@dataclass(frozen=True)
class Viewer:
    """The person looking at the page; anonymous when user_id is None."""

    user_id: str | None = None
    username: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


def display_name(author: AuthorItem | None) -> str:
    """Author name, or the placeholder when the author is unknown."""
    if author is None or not author.username:
        return UNKNOWN_AUTHOR
    return author.username


def format_time(value: datetime) -> str:
    """Format a timestamp as YYYY/MM/DD HH:MM in local time."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(TIME_FORMAT)


def is_owner(comment: CommentItem, viewer: Viewer) -> bool:
    """Whether the viewer wrote the comment."""
    if viewer.user_id is None or comment.author is None:
        return False
    return comment.author.user_id == viewer.user_id


@dataclass
class CommentCard:
    """View-model of a top-level comment."""

    comment_id: str
    author_name: str
    created_at: str
    content: str
    likes: int
    reply_count: int
    is_selected: bool
    can_delete: bool
    on_show_replies: Action
    on_delete: Action
    on_like: LikeAction

    @classmethod
    def build(
        cls,
        comment: CommentItem,
        viewer: Viewer,
        selected_comment_id: str | None,
        on_show_replies: Action,
        on_delete: Action,
        on_like: LikeAction,
    ) -> "CommentCard":
        return cls(
            comment_id=comment.comment_id,
            author_name=display_name(comment.author),
            created_at=format_time(comment.created_at),
            content=comment.content,
            likes=comment.likes,
            reply_count=comment.reply_count or 0,
            is_selected=comment.comment_id == selected_comment_id,
            can_delete=is_owner(comment, viewer),
            on_show_replies=on_show_replies,
            on_delete=on_delete,
            on_like=on_like,
        )

    async def show_replies(self) -> None:
        await self.on_show_replies()

    async def delete(self) -> None:
        """Delete the comment; ignored unless the viewer owns it."""
        if self.can_delete:
            await self.on_delete()

    async def like(self) -> None:
        await self.on_like(True)

    async def unlike(self) -> None:
        await self.on_like(False)


@dataclass
class ReplyCard:
    """View-model of a reply in the reply pane."""

    comment_id: str
    author_name: str
    reply_to_name: str
    created_at: str
    content: str
    likes: int
    can_delete: bool
    on_delete: Action
    on_like: LikeAction
    on_reply: ReplyAction | None = None

    @classmethod
    def build(
        cls,
        reply: CommentItem,
        viewer: Viewer,
        on_delete: Action,
        on_like: LikeAction,
        on_reply: ReplyAction | None = None,
    ) -> "ReplyCard":
        return cls(
            comment_id=reply.comment_id,
            author_name=display_name(reply.author),
            reply_to_name=display_name(reply.reply_to.author if reply.reply_to else None),
            created_at=format_time(reply.created_at),
            content=reply.content,
            likes=reply.likes,
            can_delete=is_owner(reply, viewer),
            on_delete=on_delete,
            on_like=on_like,
            on_reply=on_reply,
        )

    def reply(self) -> None:
        """Answer this reply with the next posted reply."""
        if self.on_reply is not None:
            self.on_reply()

    async def delete(self) -> None:
        """Delete the reply; ignored unless the viewer owns it."""
        if self.can_delete:
            await self.on_delete()

    async def like(self) -> None:
        await self.on_like(True)

    async def unlike(self) -> None:
        await self.on_like(False)
