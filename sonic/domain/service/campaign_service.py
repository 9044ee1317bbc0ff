"""Campaign participation domain service."""

from typing import Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from sonic.domain.model.campaign_participation import CampaignParticipation
from sonic.domain.repository import CampaignParticipationRepository
from sonic.domain.value import PostId, UserId

from .base import Service


class CampaignService(Service):
    """Domain service for campaign participation."""

    def __init__(
        self, participation_repository: CampaignParticipationRepository
    ) -> None:
        """Initialize campaign service.

        Args:
            participation_repository: Campaign participation repository
        """
        self.participation_repository = participation_repository

    async def join(self, post_id: PostId, user_id: UserId) -> bool:
        """Add the user to the campaign if not already a participant.

        The caller is responsible for checking the post is a campaign.

        Args:
            post_id: Campaign post ID
            user_id: User ID

        Returns:
            True if this call created the participation
        """
        with logfire.span(
            "campaign_service.join", post_id=str(post_id), user_id=str(user_id)
        ):
            if await self.participation_repository.exists(post_id, user_id):
                logfire.info(
                    "Already a participant", post_id=str(post_id), user_id=str(user_id)
                )
                return False

            try:
                await self.participation_repository.save(
                    CampaignParticipation.create_new(post_id, user_id)
                )
            except IntegrityError:
                logfire.warn(
                    "Duplicate participation ignored",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                return False

            logfire.info("Campaign joined", post_id=str(post_id), user_id=str(user_id))
            return True

    async def is_participant(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether the user participates in the campaign."""
        return await self.participation_repository.exists(post_id, user_id)

    async def count_for_post(self, post_id: PostId) -> int:
        """Count participants of a campaign."""
        return await self.participation_repository.count_by_post(post_id)

    async def count_for_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count participants for several campaigns at once."""
        if not post_ids:
            return {}
        return await self.participation_repository.count_by_posts(post_ids)
