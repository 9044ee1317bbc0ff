"""Campaign participation entity.

Records that a user joined a campaign post. At most one record exists per
(post, user) pair.
"""

from datetime import datetime
from uuid import uuid4

from pydantic import Field

from sonic.domain.model.common import DomainModel, utc_now
from sonic.domain.value import ParticipationId, PostId, UserId


class CampaignParticipation(DomainModel):
    """Campaign participation entity."""

    id: ParticipationId
    post_id: PostId
    user_id: UserId
    joined_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create_new(cls, post_id: PostId, user_id: UserId) -> "CampaignParticipation":
        """Create a participation record joined now."""
        return cls(id=ParticipationId(uuid4()), post_id=post_id, user_id=user_id)
