"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from reel.application.usecase.comment import (
    CommentItem,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
    UpdateLikesRequest,
    UpdateLikesResponse,
    UpdateLikesUseCase,
)
from reel.domain.service import JWTService

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a single comment with its author.

    Args:
        comment_id: Comment UUID
        get_comment_use_case: Get comment use case from DI

    Returns:
        Comment details
    """
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.get("/{comment_id}/replies", response_model=GetRepliesResponse)
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> GetRepliesResponse:
    """Get the replies of a top-level comment, newest first.

    Each reply carries the author it is directed at, if any.
    """
    return await get_replies_use_case.execute(GetRepliesRequest(comment_id=comment_id))


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=10000)


@router.patch("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Update a comment's content.

    Only the comment author can edit.

    Args:
        comment_id: Comment UUID
        request: Update data (content)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated comment details

    Raises:
        HTTPException: If not authenticated
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to edit comments",
        )

    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=user_id, content=request.content
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment.

    Only the comment author can delete. Deleting a top-level comment
    also deletes its replies.

    Raises:
        HTTPException: If not authenticated
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )


class UpdateLikesAPIRequest(BaseModel):
    """API request for liking or unliking a comment."""

    increment: bool


@router.put("/{comment_id}/likes", response_model=UpdateLikesResponse)
async def update_likes(
    comment_id: str,
    request: UpdateLikesAPIRequest,
    update_likes_use_case: FromDishka[UpdateLikesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateLikesResponse:
    """Like (increment=true) or unlike (increment=false) a comment.

    Likes are a raw counter: there is no per-user tracking, so repeated
    likes keep counting. Unliking a comment at zero leaves it at zero.

    Raises:
        HTTPException: If not authenticated
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to like comments",
        )

    return await update_likes_use_case.execute(
        UpdateLikesRequest(comment_id=comment_id, increment=request.increment)
    )
