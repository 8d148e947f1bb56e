"""SQLAlchemy table definitions for Threads.

Tables are used through SQLAlchemy Core; rows are mapped to the pydantic
domain models in ``mappers``. They match the schema in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column(
        "id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"
    ),
    Column("external_id", String(255), nullable=False, unique=True),
    Column("username", String(30), nullable=False, unique=True),  # Lowercase
    Column("name", String(30), nullable=False),
    Column("bio", Text, nullable=True),
    Column("image", Text, nullable=True),
    Column("onboarded", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# COMMUNITIES TABLE
# ============================================================================
communities_table = Table(
    "communities",
    metadata,
    Column(
        "id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"
    ),
    Column("handle", String(30), nullable=False, unique=True),  # Lowercase
    Column("name", String(50), nullable=False),
    Column("image", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column(
        "created_by",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_communities_created_by", communities_table.c.created_by)
Index("idx_communities_created_at", communities_table.c.created_at)

# ============================================================================
# COMMUNITY_MEMBERS TABLE (junction table for many-to-many membership)
# ============================================================================
community_members_table = Table(
    "community_members",
    metadata,
    Column(
        "community_id",
        UUID(as_uuid=True),
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("community_id", "user_id", name="uq_community_member"),
)

Index("idx_community_members_user_id", community_members_table.c.user_id)

# ============================================================================
# THREADS TABLE (top-level threads and replies)
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column(
        "id", UUID(as_uuid=True), primary_key=True, server_default="uuid_generate_v4()"
    ),
    Column("text", Text, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "community_id",
        UUID(as_uuid=True),
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(text) >= 3", name="thread_text_min_length"),
)

Index("idx_threads_parent_id", threads_table.c.parent_id)
Index("idx_threads_author_id", threads_table.c.author_id)
Index("idx_threads_community_id", threads_table.c.community_id)
Index("idx_threads_created_at", threads_table.c.created_at.desc())
