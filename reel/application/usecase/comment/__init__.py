"""Comment use cases."""

from .common import AuthorItem, CommentItem, ReplyToItem, ThreadSummaryItem
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_author_comments import (
    GetAuthorCommentsRequest,
    GetAuthorCommentsResponse,
    GetAuthorCommentsUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase
from .update_likes import UpdateLikesRequest, UpdateLikesResponse, UpdateLikesUseCase

__all__ = [
    "AuthorItem",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetAuthorCommentsRequest",
    "GetAuthorCommentsResponse",
    "GetAuthorCommentsUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "ReplyToItem",
    "ThreadSummaryItem",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
    "UpdateLikesRequest",
    "UpdateLikesResponse",
    "UpdateLikesUseCase",
]
