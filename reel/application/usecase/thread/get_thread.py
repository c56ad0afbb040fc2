"""Get thread use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from reel.application.usecase.comment.common import AuthorItem
from reel.domain.repository import UserRepository
from reel.domain.service import ThreadService
from reel.domain.value import ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str  # UUID string


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread_id: str
    title: str
    description: str
    likes: int
    creator_id: str
    creator: AuthorItem | None = None  # None if the creator account is gone
    movie_id: str
    created_at: datetime


class GetThreadUseCase:
    """Use case for fetching the thread shown above its comments."""

    def __init__(
        self, thread_service: ThreadService, user_repository: UserRepository
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
            user_repository: User repository for the creator's name
        """
        self.thread_service = thread_service
        self.user_repository = user_repository

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.get_thread(
            ThreadId(UUID(request.thread_id))
        )
        creator = await self.user_repository.find_by_id(thread.creator_id)

        return GetThreadResponse(
            thread_id=str(thread.id),
            title=thread.title,
            description=thread.description,
            likes=thread.likes,
            creator_id=str(thread.creator_id),
            creator=(
                AuthorItem(user_id=str(creator.id), username=creator.username.root)
                if creator
                else None
            ),
            movie_id=str(thread.movie_id),
            created_at=thread.created_at,
        )
