"""Domain model entities for Sonic."""

from sonic.domain.model.campaign_participation import CampaignParticipation
from sonic.domain.model.comment import Comment
from sonic.domain.model.like import Like
from sonic.domain.model.post import Post
from sonic.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
    "CampaignParticipation",
]
