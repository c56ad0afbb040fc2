"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from reel.application.usecase.comment import (
    GetAuthorCommentsRequest,
    GetAuthorCommentsResponse,
    GetAuthorCommentsUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/comments", response_model=GetAuthorCommentsResponse)
async def get_user_comments(
    user_id: str,
    get_author_comments_use_case: FromDishka[GetAuthorCommentsUseCase],
) -> GetAuthorCommentsResponse:
    """Get every comment a user has written, newest first.

    Each comment includes the thread it was posted on.
    """
    return await get_author_comments_use_case.execute(
        GetAuthorCommentsRequest(user_id=user_id)
    )
