"""End-to-end tests for the thread page controller against the API."""

import httpx
import pytest
import pytest_asyncio

from reel.client import ReelApiClient, ThreadPageController, Viewer
from reel.client.controller import PageAction
from reel.interface.api.app import create_app
from tests.conftest import auth_token_for, make_comment, make_thread, make_user, seed
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest.fixture
def transport(container):
    return httpx.ASGITransport(app=create_app(container))


@pytest.fixture
def alice():
    return make_user("alice")


@pytest.fixture
def bob():
    return make_user("bob")


@pytest_asyncio.fixture
async def page_data(container, alice, bob):
    """A thread with two comments; the newer one has a reply."""
    thread = make_thread(alice)
    older = make_comment(thread, bob, content="Haku is the river", minutes_ago=30)
    newer = make_comment(thread, alice, content="No-Face is loneliness", minutes_ago=10)
    reply = make_comment(thread, bob, content="Agreed", parent=newer, minutes_ago=5)
    async with container() as env:
        await seed(env, alice, bob, thread, older, newer, reply)
    return {"thread": thread, "older": older, "newer": newer, "reply": reply}


def page_for(transport, thread, user=None) -> ThreadPageController:
    """Controller for the thread page as seen by the given user."""
    api = ReelApiClient(
        "http://testserver",
        auth_token=auth_token_for(user) if user else None,
        transport=transport,
    )
    viewer = (
        Viewer(user_id=str(user.id), username=user.username.root) if user else Viewer()
    )
    return ThreadPageController(api, str(thread.id), viewer)


class TestThreadPage:
    @pytest.mark.asyncio
    async def test_initialize_selects_newest_comment(self, transport, page_data, alice):
        # Arrange
        page = page_for(transport, page_data["thread"], alice)

        # Act
        await page.initialize()

        # Assert
        state = page.state
        assert state.errors == {}
        assert state.thread.creator.username == "alice"
        assert [c.content for c in state.comments] == [
            "No-Face is loneliness",
            "Haku is the river",
        ]
        assert state.selected_comment_id == str(page_data["newer"].id)
        assert [r.content for r in state.replies] == ["Agreed"]

    @pytest.mark.asyncio
    async def test_cards_show_ownership(self, transport, page_data, alice):
        page = page_for(transport, page_data["thread"], alice)
        await page.initialize()

        cards = page.comment_cards()

        assert [card.can_delete for card in cards] == [True, False]
        assert cards[0].is_selected
        assert page.reply_cards()[0].can_delete is False

    @pytest.mark.asyncio
    async def test_reply_to_reply_round_trip(self, transport, page_data, alice):
        # Arrange
        page = page_for(transport, page_data["thread"], alice)
        await page.initialize()
        page.set_reply_target(str(page_data["reply"].id))

        # Act
        reply = await page.post_reply("Thanks Bob")

        # Assert
        assert reply is not None
        assert reply.parent_id == str(page_data["newer"].id)
        assert page.state.replies[0].comment_id == reply.comment_id
        assert page.state.reply_to_id is None

        # A fresh page sees the reply with its attribution
        fresh = page_for(transport, page_data["thread"])
        await fresh.initialize()
        assert fresh.state.replies[0].reply_to.author.username == "bob"
        assert fresh.state.comments[0].reply_count == 2

    @pytest.mark.asyncio
    async def test_anonymous_post_reports_server_message(self, transport, page_data):
        # Arrange
        page = page_for(transport, page_data["thread"])
        await page.initialize()

        # Act
        result = await page.post_comment("hello")

        # Assert
        assert result is None
        assert (
            page.state.errors[PageAction.POST_COMMENT]
            == "Authentication required to create comments"
        )
        assert len(page.state.comments) == 2

    @pytest.mark.asyncio
    async def test_delete_someone_elses_comment(self, transport, page_data, alice):
        page = page_for(transport, page_data["thread"], alice)
        await page.initialize()

        deleted = await page.delete_comment(str(page_data["older"].id))

        assert deleted is False
        assert len(page.state.comments) == 2
        assert PageAction.DELETE_COMMENT in page.state.errors

    @pytest.mark.asyncio
    async def test_delete_selected_comment(self, transport, page_data, alice):
        page = page_for(transport, page_data["thread"], alice)
        await page.initialize()

        await page.comment_cards()[0].delete()

        assert [c.content for c in page.state.comments] == ["Haku is the river"]
        assert page.state.selected_comment_id is None
        assert page.state.replies == []

    @pytest.mark.asyncio
    async def test_like_and_unlike(self, transport, page_data, bob):
        # Arrange
        page = page_for(transport, page_data["thread"], bob)
        await page.initialize()
        card = page.comment_cards()[1]

        # Act
        await card.like()
        await card.like()
        await card.unlike()

        # Assert
        assert page.state.comments[1].likes == 1
        assert PageAction.LIKE_COMMENT not in page.state.errors

    @pytest.mark.asyncio
    async def test_missing_thread(self, transport, page_data):
        page = page_for(transport, make_thread(make_user("ghost")))

        await page.initialize()

        assert page.state.thread is None
        assert page.state.errors[PageAction.LOAD_THREAD].startswith("Thread")
        assert page.state.comments == []
