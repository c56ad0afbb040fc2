"""Repository interfaces for Reel Talk domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from reel.domain.repository.comment import CommentRepository
from reel.domain.repository.thread import ThreadRepository
from reel.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ThreadRepository",
    "CommentRepository",
]
