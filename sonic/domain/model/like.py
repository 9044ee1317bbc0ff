"""Like entity.

A like is one user's reaction to one post. Each user can like a post at
most once (enforced by a storage-level unique constraint).
"""

from datetime import datetime
from uuid import uuid4

from pydantic import Field

from sonic.domain.model.common import DomainModel, utc_now
from sonic.domain.value import LikeId, PostId, UserId


class Like(DomainModel):
    """Like entity."""

    id: LikeId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create_new(cls, post_id: PostId, user_id: UserId) -> "Like":
        """Create a like for the given post and user."""
        return cls(id=LikeId(uuid4()), post_id=post_id, user_id=user_id)
