"""PostgreSQL implementation of Thread repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from reel.domain.model import Thread
from reel.domain.repository import ThreadRepository
from reel.domain.value import ThreadId
from reel.persistence.mappers import row_to_thread, thread_to_dict
from reel.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_thread(dict(row)) if row else None

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        values = thread_to_dict(thread)
        stmt = insert(threads_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[threads_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return thread
