"""In-memory campaign participation repository for testing."""

from typing import Sequence

from sqlalchemy.exc import IntegrityError

from sonic.domain.model.campaign_participation import CampaignParticipation
from sonic.domain.repository.campaign_participation import (
    CampaignParticipationRepository,
)
from sonic.domain.value import PostId, UserId


class InMemoryCampaignParticipationRepository(CampaignParticipationRepository):
    """In-memory implementation of CampaignParticipationRepository for testing."""

    def __init__(self) -> None:
        self._participations: list[CampaignParticipation] = []

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether the user participates in the campaign."""
        return any(
            p.post_id == post_id and p.user_id == user_id
            for p in self._participations
        )

    async def save(
        self, participation: CampaignParticipation
    ) -> CampaignParticipation:
        """Save a participation.

        Raises:
            IntegrityError: If the user already participates
        """
        if await self.exists(participation.post_id, participation.user_id):
            raise IntegrityError("Duplicate participation", None, Exception())

        self._participations.append(participation)
        return participation

    async def count_by_post(self, post_id: PostId) -> int:
        """Count participants of a campaign."""
        return sum(1 for p in self._participations if p.post_id == post_id)

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count participants for several campaigns."""
        counts: dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        for p in self._participations:
            if p.post_id in counts:
                counts[p.post_id] += 1
        return counts
