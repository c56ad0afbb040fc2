"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from reel.domain.model.thread import Thread
from reel.domain.value import ThreadId


class ThreadRepository(ABC):
    """Read-only repository for Thread entity."""

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass
