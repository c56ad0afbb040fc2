"""PostgreSQL repository implementations."""

from reel.persistence.repository.comment import PostgresCommentRepository
from reel.persistence.repository.thread import PostgresThreadRepository
from reel.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "PostgresCommentRepository",
]
