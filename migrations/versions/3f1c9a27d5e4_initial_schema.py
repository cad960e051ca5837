"""initial_schema

Create the schema for Chatter:
- Users (profiles keyed by external identity, ordered thread references)
- Threads (top-level threads and replies, ordered child references)

Revision ID: 3f1c9a27d5e4
Revises:
Create Date: 2025-11-02 18:04:12.531902

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a27d5e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column(
            "onboarded", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "thread_ids",
            postgresql.ARRAY(postgresql.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.UniqueConstraint("external_id", name="users_external_id_key"),
        sa.UniqueConstraint("username", name="users_username_key"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at"])

    op.create_table(
        "threads",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "author_id",
            postgresql.UUID(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "parent_id",
            postgresql.UUID(),
            sa.ForeignKey("threads.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column(
            "children_ids",
            postgresql.ARRAY(postgresql.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("community_id", postgresql.UUID(), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )
    op.create_index(
        "idx_threads_created_at", "threads", [sa.text("created_at DESC")]
    )
    op.create_index("idx_threads_author_id", "threads", ["author_id"])
    op.create_index("idx_threads_parent_id", "threads", ["parent_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_threads_parent_id", table_name="threads")
    op.drop_index("idx_threads_author_id", table_name="threads")
    op.drop_index("idx_threads_created_at", table_name="threads")
    op.drop_table("threads")
    op.drop_index("idx_users_created_at", table_name="users")
    op.drop_table("users")
