"""Thread routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from reel.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from reel.application.usecase.thread import (
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
)
from reel.domain.service import JWTService

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> GetThreadResponse:
    """Get a thread by ID.

    Args:
        thread_id: Thread UUID
        get_thread_use_case: Get thread use case from DI

    Returns:
        Thread details
    """
    return await get_thread_use_case.execute(GetThreadRequest(thread_id=thread_id))


@router.get("/{thread_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    thread_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the top-level comments of a thread, newest first.

    Replies are fetched separately per comment; each comment carries
    its reply_count.

    Args:
        thread_id: Thread UUID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Top-level comments with their authors
    """
    return await get_comments_use_case.execute(GetCommentsRequest(thread_id=thread_id))


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Top-level comment ID for replies
    reply_to_id: str | None = None  # Comment the reply answers


@router.post(
    "/{thread_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    thread_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a thread or reply to a comment.

    Requires authentication.

    Args:
        thread_id: Thread UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment with its author

    Raises:
        HTTPException: If not authenticated
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to create comments",
        )

    return await create_comment_use_case.execute(
        CreateCommentRequest(
            thread_id=thread_id,
            content=request.content,
            author_id=user_id,
            parent_id=request.parent_id,
            reply_to_id=request.reply_to_id,
        )
    )
