"""initial_schema

Create the schema for Threads:
- Users (profiles keyed by identity-provider id)
- Communities (creator-owned groups)
- Community members (many-to-many membership)
- Threads (top-level threads and nested replies)

Revision ID: 3f1c9b7a2d40
Revises:
Create Date: 2026-10-19 10:12:44.518204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9b7a2d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("external_id", sa.String(255), nullable=False),
        sa.Column("username", sa.String(30), nullable=False),  # Lowercase
        sa.Column("name", sa.String(30), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("onboarded", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_id", name="uq_users_external_id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at"])

    # ========================================================================
    # COMMUNITIES table
    # ========================================================================
    op.create_table(
        "communities",
        _id(),
        sa.Column("handle", sa.String(30), nullable=False),  # Lowercase
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("created_by", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("handle", name="uq_communities_handle"),
    )
    op.create_index("idx_communities_created_by", "communities", ["created_by"])
    op.create_index("idx_communities_created_at", "communities", ["created_at"])

    # ========================================================================
    # COMMUNITY_MEMBERS table
    # ========================================================================
    op.create_table(
        "community_members",
        sa.Column("community_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        _timestamp("joined_at"),
        sa.ForeignKeyConstraint(
            ["community_id"], ["communities.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("community_id", "user_id", name="uq_community_member"),
    )
    op.create_index(
        "idx_community_members_user_id", "community_members", ["user_id"]
    )

    # ========================================================================
    # THREADS table (replies point at their parent)
    # ========================================================================
    op.create_table(
        "threads",
        _id(),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("community_id", sa.UUID(), nullable=True),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["community_id"], ["communities.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["parent_id"], ["threads.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("char_length(text) >= 3", name="thread_text_min_length"),
    )
    op.create_index("idx_threads_parent_id", "threads", ["parent_id"])
    op.create_index("idx_threads_author_id", "threads", ["author_id"])
    op.create_index("idx_threads_community_id", "threads", ["community_id"])
    op.create_index(
        "idx_threads_created_at",
        "threads",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("threads")
    op.drop_table("community_members")
    op.drop_table("communities")
    op.drop_table("users")
