"""Domain model entities for Reel Talk."""

from reel.domain.model.comment import Comment
from reel.domain.model.thread import Thread
from reel.domain.model.user import User

__all__ = [
    "User",
    "Thread",
    "Comment",
]
