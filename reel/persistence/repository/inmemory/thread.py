"""In-memory thread repository for testing."""

from typing import Optional

from reel.domain.model.thread import Thread
from reel.domain.repository.thread import ThreadRepository
from reel.domain.value import ThreadId

from .store import InMemoryStore


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._store.threads.get(thread_id)

    async def save(self, thread: Thread) -> Thread:
        """Save or update a thread."""
        self._store.threads[thread.id] = thread
        return thread
