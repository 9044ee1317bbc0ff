"""Campaign participation repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from sonic.domain.model.campaign_participation import CampaignParticipation
from sonic.domain.value import PostId, UserId


class CampaignParticipationRepository(ABC):
    """Repository for CampaignParticipation entity.

    One participation per (post, user) is guaranteed by a unique constraint.
    """

    @abstractmethod
    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether the user participates in the campaign."""
        pass

    @abstractmethod
    async def save(self, participation: CampaignParticipation) -> CampaignParticipation:
        """Save a participation (create).

        Raises:
            IntegrityError: If the user already participates
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count participants of a campaign."""
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count participants for several campaigns (batch query).

        Posts without participants map to 0.
        """
        pass
