"""SQLAlchemy table definitions for Reel Talk.

These table definitions are used by the Core query layer.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# THREADS TABLE (owned by the catalog side, read here)
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "creator_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("movie_id", UUID, nullable=False),  # Movie catalog lives elsewhere
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="thread_likes_non_negative"),
)

Index("idx_threads_movie_id", threads_table.c.movie_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    # Deleting a top-level comment removes its replies
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    # Attribution only: survives the target's deletion as NULL
    Column(
        "reply_to_id",
        UUID,
        ForeignKey("comments.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("content", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
)

Index("idx_comments_thread_id", comments_table.c.thread_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at.desc())
