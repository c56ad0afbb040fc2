"""Application layer DI providers."""

from dishka import Scope, provide

from reel.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetAuthorCommentsUseCase,
    GetCommentUseCase,
    GetCommentsUseCase,
    GetRepliesUseCase,
    UpdateCommentUseCase,
    UpdateLikesUseCase,
)
from reel.application.usecase.thread import GetThreadUseCase
from reel.domain.repository import UserRepository
from reel.domain.service import CommentService, ThreadService, UserService
from reel.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, thread_service: ThreadService, user_repository: UserRepository
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service, user_repository=user_repository
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_author_comments_use_case(
        self, comment_service: CommentService
    ) -> GetAuthorCommentsUseCase:
        """Provide get author comments use case."""
        return GetAuthorCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            thread_service=thread_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_likes_use_case(
        self, comment_service: CommentService
    ) -> UpdateLikesUseCase:
        """Provide update likes use case."""
        return UpdateLikesUseCase(comment_service=comment_service)
