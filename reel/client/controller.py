"""Data controller for the thread page.

Holds the page state (thread, top-level comments, the selected comment's
replies) and performs the network operations that change it. Controller
methods never raise for API failures: they record a message in
``state.errors`` under the action that failed and keep the previous state.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from functools import partial

import logfire

from reel.application.usecase.comment import CommentItem
from reel.application.usecase.thread import GetThreadResponse
from reel.client.api import ReelApiClient
from reel.client.cards import CommentCard, ReplyCard, Viewer
from reel.client.error import ApiRequestError


class PageAction(str, Enum):
    """Operations of the thread page that can fail."""

    LOAD_THREAD = "load_thread"
    LOAD_COMMENTS = "load_comments"
    LOAD_REPLIES = "load_replies"
    POST_COMMENT = "post_comment"
    POST_REPLY = "post_reply"
    DELETE_COMMENT = "delete_comment"
    LIKE_COMMENT = "like_comment"


DEFAULT_ERRORS: dict[PageAction, str] = {
    PageAction.LOAD_THREAD: "Failed to load thread",
    PageAction.LOAD_COMMENTS: "Failed to load comments",
    PageAction.LOAD_REPLIES: "Failed to load replies",
    PageAction.POST_COMMENT: "Failed to post comment",
    PageAction.POST_REPLY: "Failed to post reply",
    PageAction.DELETE_COMMENT: "Failed to delete comment",
    PageAction.LIKE_COMMENT: "Failed to like comment",
}


@dataclass
class ThreadPageState:
    """Everything the thread page renders."""

    thread: GetThreadResponse | None = None
    comments: list[CommentItem] = field(default_factory=list)
    replies: list[CommentItem] = field(default_factory=list)
    selected_comment_id: str | None = None
    # Reply being answered; tags the next posted reply only
    reply_to_id: str | None = None
    errors: dict[PageAction, str] = field(default_factory=dict)


class ThreadPageController:
    """Loads and mutates the data shown on one thread page."""

    def __init__(self, api: ReelApiClient, thread_id: str, viewer: Viewer) -> None:
        """Initialize thread page controller.

        Args:
            api: Reel Talk API client
            thread_id: Thread shown on the page
            viewer: Person looking at the page
        """
        self.api = api
        self.thread_id = thread_id
        self.viewer = viewer
        self.state = ThreadPageState()
        # Bumped on every selection; older reply fetches are discarded
        self._selection = 0

    # ------------------------------------------------------------------
    # Error bookkeeping
    # ------------------------------------------------------------------

    def _fail(self, action: PageAction, error: ApiRequestError) -> None:
        message = error.message or DEFAULT_ERRORS[action]
        self.state.errors[action] = message
        logfire.warn(
            "Thread page action failed",
            action=action.value,
            thread_id=self.thread_id,
            kind=error.kind,
            status_code=error.status_code,
            error=message,
        )

    def _succeed(self, action: PageAction) -> None:
        self.state.errors.pop(action, None)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """Load the thread and its comments, then the first comment's replies."""
        with logfire.span("thread_page.initialize", thread_id=self.thread_id):
            await asyncio.gather(self.load_thread(), self.load_comments())

            if self.state.comments:
                await self.select_comment(self.state.comments[0].comment_id)

    async def load_thread(self) -> None:
        try:
            self.state.thread = await self.api.get_thread(self.thread_id)
        except ApiRequestError as e:
            self._fail(PageAction.LOAD_THREAD, e)
            return
        self._succeed(PageAction.LOAD_THREAD)

    async def load_comments(self) -> None:
        try:
            response = await self.api.get_comments(self.thread_id)
        except ApiRequestError as e:
            self._fail(PageAction.LOAD_COMMENTS, e)
            return
        self.state.comments = response.comments
        self._succeed(PageAction.LOAD_COMMENTS)

    async def select_comment(self, comment_id: str) -> None:
        """Point the reply pane at a comment and fetch its replies.

        When selections overlap, only the latest one's replies are kept.
        """
        self._selection += 1
        ticket = self._selection

        if self.state.selected_comment_id != comment_id:
            self.state.replies = []
        self.state.selected_comment_id = comment_id
        self.state.reply_to_id = None

        try:
            response = await self.api.get_replies(comment_id)
        except ApiRequestError as e:
            if ticket == self._selection:
                self._fail(PageAction.LOAD_REPLIES, e)
            return

        if ticket != self._selection:
            logfire.debug(
                "Discarding replies for superseded selection", comment_id=comment_id
            )
            return

        self.state.replies = response.replies
        self._succeed(PageAction.LOAD_REPLIES)

    def set_reply_target(self, comment_id: str | None) -> None:
        """Choose which comment the next reply answers."""
        self.state.reply_to_id = comment_id

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def post_comment(self, content: str) -> CommentItem | None:
        """Post a top-level comment and prepend it to the list."""
        try:
            comment = await self.api.create_comment(self.thread_id, content)
        except ApiRequestError as e:
            self._fail(PageAction.POST_COMMENT, e)
            return None

        self.state.comments = [comment, *self.state.comments]
        self._succeed(PageAction.POST_COMMENT)
        return comment

    async def post_reply(self, content: str) -> CommentItem | None:
        """Post a reply to the selected comment and prepend it to the pane."""
        parent_id = self.state.selected_comment_id
        if parent_id is None:
            self.state.errors[PageAction.POST_REPLY] = "Select a comment to reply to"
            return None

        try:
            reply = await self.api.create_comment(
                self.thread_id,
                content,
                parent_id=parent_id,
                reply_to_id=self.state.reply_to_id,
            )
        except ApiRequestError as e:
            self._fail(PageAction.POST_REPLY, e)
            return None

        self.state.reply_to_id = None
        if self.state.selected_comment_id == parent_id:
            self.state.replies = [reply, *self.state.replies]
        self._adjust_reply_count(parent_id, 1)
        self._succeed(PageAction.POST_REPLY)
        return reply

    async def delete_comment(self, comment_id: str) -> bool:
        """Delete a comment or reply and drop it from the local lists."""
        try:
            await self.api.delete_comment(comment_id)
        except ApiRequestError as e:
            self._fail(PageAction.DELETE_COMMENT, e)
            return False

        if any(c.comment_id == comment_id for c in self.state.comments):
            self.state.comments = [
                c for c in self.state.comments if c.comment_id != comment_id
            ]
            if self.state.selected_comment_id == comment_id:
                # Replies went with their parent
                self.state.selected_comment_id = None
                self.state.replies = []
                self.state.reply_to_id = None
        else:
            before = len(self.state.replies)
            self.state.replies = [
                r for r in self.state.replies if r.comment_id != comment_id
            ]
            if len(self.state.replies) < before and self.state.selected_comment_id:
                self._adjust_reply_count(self.state.selected_comment_id, -1)
            if self.state.reply_to_id == comment_id:
                self.state.reply_to_id = None

        self._succeed(PageAction.DELETE_COMMENT)
        return True

    async def like_comment(self, comment_id: str, increment: bool) -> None:
        """Like or unlike optimistically, reconciling with the server count."""
        current = self._find(comment_id)
        if current is None:
            return

        optimistic = current.likes + 1 if increment else max(current.likes - 1, 0)
        delta = optimistic - current.likes
        self._set_likes(comment_id, optimistic)

        try:
            response = await self.api.update_likes(comment_id, increment)
        except ApiRequestError as e:
            rolled_back = self._find(comment_id)
            if rolled_back is not None:
                self._set_likes(comment_id, max(rolled_back.likes - delta, 0))
            self._fail(PageAction.LIKE_COMMENT, e)
            return

        self._set_likes(comment_id, response.likes)
        self._succeed(PageAction.LIKE_COMMENT)

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    def comment_cards(self) -> list[CommentCard]:
        """Cards for the top-level comment column."""
        return [
            CommentCard.build(
                comment,
                self.viewer,
                selected_comment_id=self.state.selected_comment_id,
                on_show_replies=partial(self.select_comment, comment.comment_id),
                on_delete=partial(self._delete_action, comment.comment_id),
                on_like=partial(self.like_comment, comment.comment_id),
            )
            for comment in self.state.comments
        ]

    def reply_cards(self) -> list[ReplyCard]:
        """Cards for the reply pane."""
        return [
            ReplyCard.build(
                reply,
                self.viewer,
                on_delete=partial(self._delete_action, reply.comment_id),
                on_like=partial(self.like_comment, reply.comment_id),
                on_reply=partial(self.set_reply_target, reply.comment_id),
            )
            for reply in self.state.replies
        ]

    async def _delete_action(self, comment_id: str) -> None:
        await self.delete_comment(comment_id)

    # ------------------------------------------------------------------
    # Local list helpers
    # ------------------------------------------------------------------

    def _find(self, comment_id: str) -> CommentItem | None:
        for item in (*self.state.comments, *self.state.replies):
            if item.comment_id == comment_id:
                return item
        return None

    def _set_likes(self, comment_id: str, likes: int) -> None:
        self.state.comments = _replace(self.state.comments, comment_id, likes=likes)
        self.state.replies = _replace(self.state.replies, comment_id, likes=likes)

    def _adjust_reply_count(self, comment_id: str, delta: int) -> None:
        for item in self.state.comments:
            if item.comment_id == comment_id:
                count = max((item.reply_count or 0) + delta, 0)
                self.state.comments = _replace(
                    self.state.comments, comment_id, reply_count=count
                )
                return


def _replace(items: list[CommentItem], comment_id: str, **update) -> list[CommentItem]:
    return [
        item.model_copy(update=update) if item.comment_id == comment_id else item
        for item in items
    ]
