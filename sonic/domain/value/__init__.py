"""Domain value objects for Sonic."""

from sonic.domain.value.identifiers import (
    CommentId,
    LikeId,
    ParticipationId,
    PostId,
    UserId,
)
from sonic.domain.value.types import PageRequest, PostType, UserRole

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    "ParticipationId",
    # Types
    "PostType",
    "UserRole",
    "PageRequest",
]
