"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .store import InMemoryStore
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryStore",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
