"""Domain layer DI providers."""

from dishka import Scope, provide

from reel.config import AuthSettings
from reel.domain.repository import (
    CommentRepository,
    ThreadRepository,
    UserRepository,
)
from reel.domain.service import (
    CommentService,
    JWTService,
    ThreadService,
    UserService,
)
from reel.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_thread_service(self, thread_repository: ThreadRepository) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(thread_repository=thread_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
