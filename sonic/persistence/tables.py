"""SQLAlchemy table definitions for Sonic.

These table definitions are used by the repositories through SQLAlchemy
Core. They match the schema defined in Alembic migrations.

References between tables are by id only: there are no foreign keys, so
soft-deleted posts keep their likes, comments and participants.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
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
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(320), nullable=False),  # Trimmed and lowercased
    Column("password_hash", Text, nullable=False),
    Column("display_name", String(100), nullable=False),
    Column("bio", String(1000), nullable=True),
    Column("job_role", String(200), nullable=True),
    Column("interests", ARRAY(Text), nullable=False, server_default="{}"),
    Column("avatar_url", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="User"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("ux_users_email", users_table.c.email, unique=True)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("type", String(20), nullable=False),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("external_link", Text, nullable=True),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("campaign_goal", Text, nullable=True),  # Campaign posts only
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("is_featured", Boolean, nullable=False, server_default="false"),
)

Index(
    "idx_posts_is_deleted_created_at",
    posts_table.c.is_deleted,
    posts_table.c.created_at.desc(),
)
Index(
    "idx_posts_is_featured_created_at",
    posts_table.c.is_featured,
    posts_table.c.created_at.desc(),
)
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
)

Index(
    "idx_comments_post_id_is_deleted_created_at",
    comments_table.c.post_id,
    comments_table.c.is_deleted,
    comments_table.c.created_at,
)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),
)

# ============================================================================
# CAMPAIGN PARTICIPATIONS TABLE
# ============================================================================
campaign_participations_table = Table(
    "campaign_participations",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "post_id", "user_id", name="uq_campaign_participations_post_user"
    ),
)
