"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .thread_service import ThreadService
from .user_service import UserService

__all__ = [
    "CommentService",
    "JWTService",
    "Service",
    "ThreadService",
    "UserService",
]
