"""Unit tests for the comment and reply cards."""

from datetime import datetime

import pytest

from reel.application.usecase.comment import AuthorItem, CommentItem, ReplyToItem
from reel.client.cards import CommentCard, ReplyCard, Viewer, format_time


def make_item(**overrides) -> CommentItem:
    values = {
        "comment_id": "c-1",
        "thread_id": "t-1",
        "author_id": "u-alice",
        "content": "The train scene is perfect.",
        "likes": 3,
        "created_at": datetime(2024, 4, 15, 14, 30),
        "author": AuthorItem(user_id="u-alice", username="alice"),
        "reply_count": 2,
    }
    values.update(overrides)
    return CommentItem(**values)


class Recorder:
    """Collects the calls made through card callbacks."""

    def __init__(self):
        self.calls = []

    async def show(self):
        self.calls.append("show")

    async def delete(self):
        self.calls.append("delete")

    async def like(self, increment):
        self.calls.append(("like", increment))


def build_comment_card(item, viewer, recorder, selected=None):
    return CommentCard.build(
        item,
        viewer,
        selected_comment_id=selected,
        on_show_replies=recorder.show,
        on_delete=recorder.delete,
        on_like=recorder.like,
    )


class TestCommentCard:
    def test_display_fields(self):
        card = build_comment_card(make_item(), Viewer(), Recorder(), selected="c-1")

        assert card.author_name == "alice"
        assert card.created_at == "2024/04/15 14:30"
        assert card.likes == 3
        assert card.reply_count == 2
        assert card.is_selected is True

    def test_unknown_author_falls_back(self):
        card = build_comment_card(make_item(author=None), Viewer(), Recorder())

        assert card.author_name == "Unknown"
        assert card.is_selected is False

    def test_owner_can_delete(self):
        card = build_comment_card(make_item(), Viewer(user_id="u-alice"), Recorder())

        assert card.can_delete is True

    def test_other_viewer_cannot_delete(self):
        card = build_comment_card(make_item(), Viewer(user_id="u-bob"), Recorder())

        assert card.can_delete is False

    def test_anonymous_viewer_cannot_delete_authorless_comment(self):
        card = build_comment_card(make_item(author=None), Viewer(), Recorder())

        assert card.can_delete is False

    @pytest.mark.asyncio
    async def test_callbacks(self):
        # Arrange
        recorder = Recorder()
        card = build_comment_card(make_item(), Viewer(user_id="u-alice"), recorder)

        # Act
        await card.show_replies()
        await card.like()
        await card.unlike()
        await card.delete()

        # Assert
        assert recorder.calls == ["show", ("like", True), ("like", False), "delete"]

    @pytest.mark.asyncio
    async def test_delete_is_ignored_for_non_owner(self):
        recorder = Recorder()
        card = build_comment_card(make_item(), Viewer(user_id="u-bob"), recorder)

        await card.delete()

        assert recorder.calls == []


class TestReplyCard:
    def test_reply_to_name(self):
        item = make_item(
            parent_id="c-0",
            reply_to=ReplyToItem(
                comment_id="c-0", author=AuthorItem(user_id="u-bob", username="bob")
            ),
        )
        recorder = Recorder()

        card = ReplyCard.build(item, Viewer(), on_delete=recorder.delete, on_like=recorder.like)

        assert card.reply_to_name == "bob"
        assert card.author_name == "alice"

    def test_missing_reply_to_falls_back(self):
        recorder = Recorder()

        card = ReplyCard.build(
            make_item(parent_id="c-0"),
            Viewer(user_id="u-alice"),
            on_delete=recorder.delete,
            on_like=recorder.like,
        )

        assert card.reply_to_name == "Unknown"
        assert card.can_delete is True


def test_format_time_naive():
    assert format_time(datetime(2025, 1, 2, 3, 4, 59)) == "2025/01/02 03:04"
