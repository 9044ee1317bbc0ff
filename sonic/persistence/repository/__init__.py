"""PostgreSQL repository implementations."""

from sonic.persistence.repository.campaign_participation import (
    PostgresCampaignParticipationRepository,
)
from sonic.persistence.repository.comment import PostgresCommentRepository
from sonic.persistence.repository.like import PostgresLikeRepository
from sonic.persistence.repository.post import PostgresPostRepository
from sonic.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresCampaignParticipationRepository",
]
