"""SQLAlchemy table definitions for Chatter.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Reference lists (a user's threads, a thread's replies) are stored as ordered
UUID arrays on the owning row and extended with ``array_append``.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("external_id", String(255), nullable=False, unique=True),
    Column("username", String(255), nullable=False, unique=True),  # Lowercase
    Column("name", String(255), nullable=False),
    Column("bio", Text, nullable=False, server_default=""),
    Column("image", Text, nullable=True),
    Column("onboarded", Boolean, nullable=False, server_default="false"),
    Column("thread_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# THREADS TABLE (top-level threads and replies)
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=True
    ),
    Column("children_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("community_id", UUID, nullable=True),  # No communities table yet
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_threads_created_at", threads_table.c.created_at.desc())
Index("idx_threads_author_id", threads_table.c.author_id)
Index("idx_threads_parent_id", threads_table.c.parent_id)
