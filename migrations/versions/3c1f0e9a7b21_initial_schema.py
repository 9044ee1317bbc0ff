"""initial_schema

Create the schema for Sonic:
- Users (email/password accounts with a role)
- Posts (6 types, campaign posts carry a goal)
- Comments (flat, soft-deletable)
- Likes (one per user and post)
- Campaign participations (one per user and campaign)

Revision ID: 3c1f0e9a7b21
Revises:
Create Date: 2026-10-19 09:12:44.301218

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0e9a7b21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=nullable,
        server_default=None if nullable else sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=False),
        sa.Column("bio", sa.String(1000), nullable=True),
        sa.Column("job_role", sa.String(200), nullable=True),
        sa.Column(
            "interests",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="User"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ux_users_email", "users", ["email"], unique=True)

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "tags", postgresql.ARRAY(sa.Text()), nullable=False, server_default="{}"
        ),
        sa.Column("external_link", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("campaign_goal", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_posts_is_deleted_created_at",
        "posts",
        ["is_deleted", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_posts_is_featured_created_at",
        "posts",
        ["is_featured", sa.text("created_at DESC")],
    )
    # Any-of tag filtering uses the && operator
    op.create_index("idx_posts_tags", "posts", ["tags"], postgresql_using="gin")

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at", nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_post_id_is_deleted_created_at",
        "comments",
        ["post_id", "is_deleted", "created_at"],
    )

    # ========================================================================
    # LIKES table
    # ========================================================================
    op.create_table(
        "likes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),
    )

    # ========================================================================
    # CAMPAIGN_PARTICIPATIONS table
    # ========================================================================
    op.create_table(
        "campaign_participations",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        _timestamp("joined_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "post_id", "user_id", name="uq_campaign_participations_post_user"
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("campaign_participations")
    op.drop_table("likes")
    op.drop_index("idx_comments_post_id_is_deleted_created_at", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_posts_tags", table_name="posts")
    op.drop_index("idx_posts_is_featured_created_at", table_name="posts")
    op.drop_index("idx_posts_is_deleted_created_at", table_name="posts")
    op.drop_table("posts")
    op.drop_index("ux_users_email", table_name="users")
    op.drop_table("users")
