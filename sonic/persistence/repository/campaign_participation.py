"""PostgreSQL implementation of campaign participation repository."""

from typing import Sequence

import logfire
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sonic.domain.model import CampaignParticipation
from sonic.domain.repository import CampaignParticipationRepository
from sonic.domain.value import PostId, UserId
from sonic.persistence.mappers import participation_to_dict
from sonic.persistence.tables import campaign_participations_table as participations


class PostgresCampaignParticipationRepository(CampaignParticipationRepository):
    """PostgreSQL implementation of CampaignParticipationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, post_id: PostId, user_id: UserId) -> bool:
        """Check whether the user participates in the campaign."""
        stmt = select(participations.c.id).where(
            participations.c.post_id == post_id,
            participations.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(
        self, participation: CampaignParticipation
    ) -> CampaignParticipation:
        """Insert a campaign participation.

        The insert runs in a savepoint so a unique violation leaves the
        request transaction usable.

        Raises:
            IntegrityError: If the user already participates in the campaign
        """
        with logfire.span(
            "participation_repository.save",
            post_id=str(participation.post_id),
            user_id=str(participation.user_id),
        ):
            async with self.session.begin_nested():
                await self.session.execute(
                    participations.insert().values(
                        **participation_to_dict(participation)
                    )
                )
            return participation

    async def count_by_post(self, post_id: PostId) -> int:
        """Count participants of a campaign."""
        stmt = (
            select(func.count())
            .select_from(participations)
            .where(participations.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_posts(self, post_ids: Sequence[PostId]) -> dict[PostId, int]:
        """Count participants for several campaigns in a single query.

        Campaigns without participants are reported with a count of zero.
        """
        counts: dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        if not post_ids:
            return counts

        stmt = (
            select(
                participations.c.post_id,
                func.count().label("participant_count"),
            )
            .where(participations.c.post_id.in_(list(post_ids)))
            .group_by(participations.c.post_id)
        )
        result = await self.session.execute(stmt)
        for row in result.all():
            counts[PostId(row.post_id)] = row.participant_count
        return counts
