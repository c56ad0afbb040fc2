"""Client for the thread page: API access, page controller and cards."""

from reel.client.api import ReelApiClient
from reel.client.cards import CommentCard, ReplyCard, Viewer
from reel.client.controller import (
    PageAction,
    ThreadPageController,
    ThreadPageState,
)
from reel.client.error import ApiRequestError, ClientError

__all__ = [
    "ApiRequestError",
    "ClientError",
    "CommentCard",
    "PageAction",
    "ReelApiClient",
    "ReplyCard",
    "ThreadPageController",
    "ThreadPageState",
    "Viewer",
]
