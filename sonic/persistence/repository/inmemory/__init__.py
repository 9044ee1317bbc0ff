"""In-memory repository implementations for testing."""

from .campaign_participation import InMemoryCampaignParticipationRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCampaignParticipationRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
