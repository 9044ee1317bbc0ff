"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from sonic.domain.model import CampaignParticipation, Comment, Like, Post, User
from sonic.domain.value import (
    CommentId,
    LikeId,
    ParticipationId,
    PostId,
    PostType,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        password_hash=row["password_hash"],
        display_name=row["display_name"],
        bio=row.get("bio"),
        job_role=row.get("job_role"),
        interests=list(row.get("interests") or []),
        avatar_url=row.get("avatar_url"),
        role=UserRole(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        type=PostType(row["type"]),
        title=row["title"],
        body=row["body"],
        tags=list(row.get("tags") or []),
        external_link=row.get("external_link"),
        author_id=UserId(_uuid(row["author_id"])),
        campaign_goal=row.get("campaign_goal"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        is_deleted=row["is_deleted"],
        is_featured=row["is_featured"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump()
    data["type"] = post.type.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
        is_deleted=row["is_deleted"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()


def row_to_participation(row: Dict[str, Any]) -> CampaignParticipation:
    """Convert database row to CampaignParticipation domain model."""
    return CampaignParticipation(
        id=ParticipationId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        joined_at=row["joined_at"],
    )


def participation_to_dict(participation: CampaignParticipation) -> Dict[str, Any]:
    """Convert CampaignParticipation domain model to database dict."""
    return participation.model_dump()
