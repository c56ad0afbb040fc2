"""Unit tests for ThreadPageController with a scripted API."""

import asyncio
from datetime import datetime

import httpx
import pytest

from reel.application.usecase.comment import (
    AuthorItem,
    CommentItem,
    DeleteCommentResponse,
    GetCommentsResponse,
    GetRepliesResponse,
    UpdateLikesResponse,
)
from reel.application.usecase.thread import GetThreadResponse
from reel.client.api import ReelApiClient
from reel.client.cards import Viewer
from reel.client.controller import PageAction, ThreadPageController
from reel.client.error import ApiRequestError

THREAD_ID = "t-1"


def item(comment_id: str, likes: int = 0, parent_id: str | None = None, **extra) -> CommentItem:
    return CommentItem(
        comment_id=comment_id,
        thread_id=THREAD_ID,
        author_id="u-alice",
        content=f"comment {comment_id}",
        likes=likes,
        parent_id=parent_id,
        created_at=datetime(2025, 1, 1, 12, 0),
        author=AuthorItem(user_id="u-alice", username="alice"),
        **extra,
    )


class FakeApi:
    """Stands in for ReelApiClient; failures are scripted per method."""

    def __init__(self):
        self.comments = [item("c-1", reply_count=1), item("c-2")]
        self.replies = {"c-1": [item("r-1", parent_id="c-1")], "c-2": []}
        self.failures: dict[str, ApiRequestError] = {}
        self.reply_gates: dict[str, asyncio.Event] = {}
        self.likes: dict[str, int] = {}
        self.created: list[dict] = []

    def _maybe_fail(self, name):
        if name in self.failures:
            raise self.failures[name]

    async def get_thread(self, thread_id):
        self._maybe_fail("get_thread")
        return GetThreadResponse(
            thread_id=thread_id,
            title="Spirited Away",
            description="",
            likes=0,
            creator_id="u-alice",
            movie_id="m-1",
            created_at=datetime(2025, 1, 1),
        )

    async def get_comments(self, thread_id):
        self._maybe_fail("get_comments")
        return GetCommentsResponse(
            thread_id=thread_id, comments=self.comments, total=len(self.comments)
        )

    async def get_replies(self, comment_id):
        if comment_id in self.reply_gates:
            await self.reply_gates[comment_id].wait()
        self._maybe_fail("get_replies")
        replies = self.replies.get(comment_id, [])
        return GetRepliesResponse(comment_id=comment_id, replies=replies, total=len(replies))

    async def create_comment(self, thread_id, content, parent_id=None, reply_to_id=None):
        self._maybe_fail("create_comment")
        self.created.append(
            {"content": content, "parent_id": parent_id, "reply_to_id": reply_to_id}
        )
        return item(f"new-{len(self.created)}", parent_id=parent_id)

    async def delete_comment(self, comment_id):
        self._maybe_fail("delete_comment")
        return DeleteCommentResponse(comment_id=comment_id, deleted=True)

    async def update_likes(self, comment_id, increment):
        self._maybe_fail("update_likes")
        return UpdateLikesResponse(comment_id=comment_id, likes=self.likes[comment_id])


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def controller(api):
    return ThreadPageController(api, THREAD_ID, Viewer(user_id="u-alice", username="alice"))


class TestInitialize:
    @pytest.mark.asyncio
    async def test_loads_thread_comments_and_first_replies(self, controller):
        # Act
        await controller.initialize()

        # Assert
        state = controller.state
        assert state.thread.title == "Spirited Away"
        assert [c.comment_id for c in state.comments] == ["c-1", "c-2"]
        assert state.selected_comment_id == "c-1"
        assert [r.comment_id for r in state.replies] == ["r-1"]
        assert state.errors == {}

    @pytest.mark.asyncio
    async def test_no_comments_means_no_selection(self, api, controller):
        api.comments = []

        await controller.initialize()

        assert controller.state.selected_comment_id is None
        assert controller.state.replies == []

    @pytest.mark.asyncio
    async def test_thread_failure_prefers_server_message(self, api, controller):
        # Arrange
        api.failures["get_thread"] = ApiRequestError("not_found", "Thread not found: t-1", 404)

        # Act
        await controller.initialize()

        # Assert - comments still load
        assert controller.state.thread is None
        assert controller.state.errors[PageAction.LOAD_THREAD] == "Thread not found: t-1"
        assert len(controller.state.comments) == 2

    @pytest.mark.asyncio
    async def test_comment_failure_falls_back_to_default_message(self, api, controller):
        api.failures["get_comments"] = ApiRequestError("network_error", None, None)

        await controller.initialize()

        assert controller.state.errors[PageAction.LOAD_COMMENTS] == "Failed to load comments"
        assert controller.state.comments == []


class TestSelection:
    @pytest.mark.asyncio
    async def test_latest_selection_wins(self, api, controller):
        # Arrange - replies for c-1 arrive after the user moved on to c-2
        await controller.initialize()
        gate = asyncio.Event()
        api.reply_gates["c-1"] = gate

        # Act
        slow = asyncio.create_task(controller.select_comment("c-1"))
        await asyncio.sleep(0)
        await controller.select_comment("c-2")
        gate.set()
        await slow

        # Assert
        assert controller.state.selected_comment_id == "c-2"
        assert controller.state.replies == []

    @pytest.mark.asyncio
    async def test_selection_clears_reply_target(self, controller):
        await controller.initialize()
        controller.set_reply_target("r-1")

        await controller.select_comment("c-2")

        assert controller.state.reply_to_id is None

    @pytest.mark.asyncio
    async def test_reply_failure_is_recorded(self, api, controller):
        await controller.initialize()
        api.failures["get_replies"] = ApiRequestError("storage_error", None, 500)

        await controller.select_comment("c-2")

        assert controller.state.errors[PageAction.LOAD_REPLIES] == "Failed to load replies"


class TestPosting:
    @pytest.mark.asyncio
    async def test_post_comment_prepends(self, controller):
        await controller.initialize()

        created = await controller.post_comment("hello")

        assert created is not None
        assert controller.state.comments[0].comment_id == created.comment_id

    @pytest.mark.asyncio
    async def test_post_comment_failure_keeps_list(self, api, controller):
        # Arrange
        await controller.initialize()
        api.failures["create_comment"] = ApiRequestError(
            "validation_error", "Comment content must not be empty", 400
        )

        # Act
        result = await controller.post_comment("   ")

        # Assert
        assert result is None
        assert len(controller.state.comments) == 2
        assert (
            controller.state.errors[PageAction.POST_COMMENT]
            == "Comment content must not be empty"
        )

    @pytest.mark.asyncio
    async def test_post_reply_uses_selection_and_clears_target(self, api, controller):
        # Arrange
        await controller.initialize()
        controller.set_reply_target("r-1")

        # Act
        reply = await controller.post_reply("hi back")

        # Assert
        assert api.created[-1] == {
            "content": "hi back",
            "parent_id": "c-1",
            "reply_to_id": "r-1",
        }
        assert controller.state.replies[0].comment_id == reply.comment_id
        assert controller.state.reply_to_id is None
        assert controller.state.comments[0].reply_count == 2

    @pytest.mark.asyncio
    async def test_post_reply_without_selection(self, api, controller):
        api.comments = []
        await controller.initialize()

        assert await controller.post_reply("into the void") is None
        assert PageAction.POST_REPLY in controller.state.errors
        assert api.created == []

    @pytest.mark.asyncio
    async def test_post_reply_failure_keeps_target(self, api, controller):
        await controller.initialize()
        controller.set_reply_target("r-1")
        api.failures["create_comment"] = ApiRequestError("network_error", None, None)

        await controller.post_reply("hi")

        assert controller.state.reply_to_id == "r-1"
        assert controller.state.errors[PageAction.POST_REPLY] == "Failed to post reply"


class TestDeleting:
    @pytest.mark.asyncio
    async def test_delete_selected_comment_clears_reply_pane(self, controller):
        await controller.initialize()

        assert await controller.delete_comment("c-1") is True

        assert [c.comment_id for c in controller.state.comments] == ["c-2"]
        assert controller.state.selected_comment_id is None
        assert controller.state.replies == []

    @pytest.mark.asyncio
    async def test_delete_reply(self, controller):
        await controller.initialize()

        await controller.delete_comment("r-1")

        assert controller.state.replies == []
        assert controller.state.comments[0].reply_count == 0

    @pytest.mark.asyncio
    async def test_forbidden_delete_keeps_item(self, api, controller):
        # Arrange
        await controller.initialize()
        api.failures["delete_comment"] = ApiRequestError(
            "forbidden", "Not authorized to delete this comment", 403
        )

        # Act
        assert await controller.delete_comment("c-2") is False

        # Assert
        assert len(controller.state.comments) == 2
        assert (
            controller.state.errors[PageAction.DELETE_COMMENT]
            == "Not authorized to delete this comment"
        )


class TestLiking:
    @pytest.mark.asyncio
    async def test_like_reconciles_with_server_count(self, api, controller):
        # Arrange - someone else liked it meanwhile
        await controller.initialize()
        api.likes["c-2"] = 5

        # Act
        await controller.like_comment("c-2", increment=True)

        # Assert
        assert controller.state.comments[1].likes == 5

    @pytest.mark.asyncio
    async def test_like_failure_rolls_back(self, api, controller):
        await controller.initialize()
        api.failures["update_likes"] = ApiRequestError("network_error", None, None)

        await controller.like_comment("r-1", increment=True)

        assert controller.state.replies[0].likes == 0
        assert controller.state.errors[PageAction.LIKE_COMMENT] == "Failed to like comment"

    @pytest.mark.asyncio
    async def test_like_is_optimistic(self, api, controller):
        # Arrange
        await controller.initialize()
        api.likes["c-1"] = 1
        gate = asyncio.Event()
        original = api.update_likes

        async def slow_update_likes(comment_id, increment):
            await gate.wait()
            return await original(comment_id, increment)

        api.update_likes = slow_update_likes

        # Act
        task = asyncio.create_task(controller.like_comment("c-1", increment=True))
        await asyncio.sleep(0)

        # Assert - visible before the server answers
        assert controller.state.comments[0].likes == 1
        gate.set()
        await task
        assert controller.state.comments[0].likes == 1


class TestCards:
    @pytest.mark.asyncio
    async def test_cards_are_wired_to_controller(self, controller):
        # Arrange
        await controller.initialize()
        cards = controller.comment_cards()

        # Act
        await cards[1].show_replies()

        # Assert
        assert controller.state.selected_comment_id == "c-2"
        assert [card.is_selected for card in controller.comment_cards()] == [False, True]

    @pytest.mark.asyncio
    async def test_reply_cards_like(self, api, controller):
        await controller.initialize()
        api.likes["r-1"] = 1

        await controller.reply_cards()[0].like()

        assert controller.state.replies[0].likes == 1

    @pytest.mark.asyncio
    async def test_reply_card_sets_reply_target(self, api, controller):
        # Arrange
        await controller.initialize()

        # Act
        controller.reply_cards()[0].reply()
        await controller.post_reply("answering r-1")

        # Assert
        assert api.created[-1]["reply_to_id"] == "r-1"
        assert controller.state.reply_to_id is None


class TestMalformedResponses:
    @pytest.mark.asyncio
    async def test_non_json_success_is_recorded_not_raised(self):
        # Arrange - a proxy answers every call with an HTML page
        def handler(request):
            return httpx.Response(200, text="<html>Sign in to the proxy</html>")

        api = ReelApiClient("http://api.test", transport=httpx.MockTransport(handler))
        controller = ThreadPageController(api, THREAD_ID, Viewer())

        # Act
        await controller.initialize()

        # Assert
        assert controller.state.thread is None
        assert controller.state.errors[PageAction.LOAD_THREAD] == "Failed to load thread"
        assert (
            controller.state.errors[PageAction.LOAD_COMMENTS]
            == "Failed to load comments"
        )

    @pytest.mark.asyncio
    async def test_like_with_wrong_shape_rolls_back(self):
        # Arrange
        comment = item("c-1", likes=3)

        def handler(request):
            if request.url.path.endswith("/likes"):
                return httpx.Response(200, json={"unexpected": True})
            if request.url.path.endswith("/comments"):
                return httpx.Response(
                    200,
                    json={
                        "thread_id": THREAD_ID,
                        "comments": [comment.model_dump(mode="json")],
                        "total": 1,
                    },
                )
            return httpx.Response(404, json={"kind": "not_found", "error": "missing"})

        api = ReelApiClient("http://api.test", transport=httpx.MockTransport(handler))
        controller = ThreadPageController(api, THREAD_ID, Viewer())
        await controller.load_comments()

        # Act
        await controller.like_comment("c-1", increment=True)

        # Assert
        assert controller.state.comments[0].likes == 3
        assert PageAction.LIKE_COMMENT in controller.state.errors
