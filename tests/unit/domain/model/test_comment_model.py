"""Unit tests for the Comment entity."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from tests.conftest import make_comment, make_thread, make_user


class TestComment:
    def test_top_level_comment_is_not_reply(self):
        author = make_user()
        comment = make_comment(make_thread(author), author)

        assert comment.is_reply is False

    def test_comment_with_parent_is_reply(self):
        author = make_user()
        thread = make_thread(author)
        parent = make_comment(thread, author)

        reply = make_comment(thread, author, parent=parent)

        assert reply.is_reply is True

    def test_negative_likes_are_rejected(self):
        author = make_user()

        with pytest.raises(PydanticValidationError):
            make_comment(make_thread(author), author, likes=-1)

    def test_comment_is_immutable(self):
        author = make_user()
        comment = make_comment(make_thread(author), author)

        with pytest.raises(PydanticValidationError):
            comment.likes = 5
