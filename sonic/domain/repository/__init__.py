"""Repository interfaces for Sonic domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from sonic.domain.repository.campaign_participation import (
    CampaignParticipationRepository,
)
from sonic.domain.repository.comment import CommentRepository
from sonic.domain.repository.like import LikeRepository
from sonic.domain.repository.post import PostFeedFilter, PostRepository
from sonic.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "PostFeedFilter",
    "CommentRepository",
    "LikeRepository",
    "CampaignParticipationRepository",
]
