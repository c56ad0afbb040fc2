"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import Select, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from reel.domain.error import NotFoundError
from reel.domain.model import Comment
from reel.domain.repository import CommentRepository
from reel.domain.value import CommentId, ThreadId, UserId
from reel.persistence.mappers import comment_to_dict, row_to_comment
from reel.persistence.tables import comments_table, threads_table, users_table

# Aliases for the self-joins on the comments table
replies_alias = comments_table.alias("replies")
reply_to_alias = comments_table.alias("reply_to")
reply_to_author_alias = users_table.alias("reply_to_author")


def _reply_count():
    """Correlated count of the direct replies of the outer comment row."""
    return (
        select(func.count())
        .select_from(replies_alias)
        .where(replies_alias.c.parent_id == comments_table.c.id)
        .correlate(comments_table)
        .scalar_subquery()
        .label("reply_count")
    )


def _with_author(*columns) -> Select:
    """Select comment columns joined with the author's username."""
    return select(
        comments_table,
        users_table.c.username.label("author_username"),
        *columns,
    ).select_from(
        comments_table.join(users_table, users_table.c.id == comments_table.c.author_id)
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = _with_author().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        """Find the top-level comments of a thread, newest first."""
        stmt = (
            _with_author(_reply_count())
            .where(comments_table.c.thread_id == thread_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find all comments by an author with thread summaries, newest first."""
        stmt = (
            select(
                comments_table,
                users_table.c.username.label("author_username"),
                threads_table.c.title.label("thread_title"),
                _reply_count(),
            )
            .select_from(
                comments_table.join(
                    users_table, users_table.c.id == comments_table.c.author_id
                ).join(threads_table, threads_table.c.id == comments_table.c.thread_id)
            )
            .where(comments_table.c.author_id == author_id)
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_replies(self, comment_id: CommentId) -> List[Comment]:
        """Find the replies of a comment with reply-to attribution, newest first."""
        stmt = (
            select(
                comments_table,
                users_table.c.username.label("author_username"),
                reply_to_alias.c.id.label("reply_to_comment_id"),
                reply_to_author_alias.c.id.label("reply_to_author_id"),
                reply_to_author_alias.c.username.label("reply_to_author_username"),
            )
            .select_from(
                comments_table.join(
                    users_table, users_table.c.id == comments_table.c.author_id
                )
                .outerjoin(
                    reply_to_alias,
                    reply_to_alias.c.id == comments_table.c.reply_to_id,
                )
                .outerjoin(
                    reply_to_author_alias,
                    reply_to_author_alias.c.id == reply_to_alias.c.author_id,
                )
            )
            .where(comments_table.c.parent_id == comment_id)
            .order_by(desc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def create(self, comment: Comment) -> Comment:
        """Insert a comment with its like counter reset to zero."""
        values = comment_to_dict(comment)
        values["likes"] = 0
        await self.session.execute(comments_table.insert().values(**values))
        await self.session.flush()

        # Fetch back with the author joined in
        created = await self.find_by_id(comment.id)
        if created is None:
            raise NotFoundError("Comment", str(comment.id))
        return created

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Comment", str(comment_id))

        await self.session.flush()
        updated = await self.find_by_id(comment_id)
        if updated is None:
            raise NotFoundError("Comment", str(comment_id))
        return updated

    async def delete(self, comment_id: CommentId) -> Comment:
        """Delete a comment (hard delete), returning its prior state."""
        stmt = (
            comments_table.delete()
            .where(comments_table.c.id == comment_id)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            raise NotFoundError("Comment", str(comment_id))

        await self.session.flush()
        return row_to_comment(dict(row))

    async def update_likes(self, comment_id: CommentId, increment: bool) -> Comment:
        """Atomically add or remove one like in a single UPDATE."""
        stmt = update(comments_table).where(comments_table.c.id == comment_id)
        if increment:
            stmt = stmt.values(likes=comments_table.c.likes + 1)
        else:
            stmt = stmt.where(comments_table.c.likes > 0).values(  # Don't go below 0
                likes=comments_table.c.likes - 1
            )
        stmt = stmt.returning(comments_table)

        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()

        if row is not None:
            return row_to_comment(dict(row))

        # Nothing updated: either missing, or an unlike at zero
        existing = await self.find_by_id(comment_id)
        if existing is None:
            raise NotFoundError("Comment", str(comment_id))
        return existing
