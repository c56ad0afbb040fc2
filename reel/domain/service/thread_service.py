"""Thread domain service."""

import logfire

from reel.domain.error import NotFoundError
from reel.domain.model import Thread
from reel.domain.repository import ThreadRepository
from reel.domain.value import ThreadId

from .base import Service


class ThreadService(Service):
    """Domain service for reading threads."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        self.thread_repository = thread_repository

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            NotFoundError: If thread not found
        """
        with logfire.span("thread_service.get_thread", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if not thread:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))
            return thread
