"""Unit tests for CampaignService."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from sonic.domain.model import CampaignParticipation
from sonic.domain.service import CampaignService
from sonic.domain.value import PostId, UserId
from sonic.persistence.repository.inmemory import (
    InMemoryCampaignParticipationRepository,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestJoin:
    """Tests for joining campaigns."""

    @pytest.mark.asyncio
    async def test_join_is_idempotent(self, unit_env):
        """Joining twice keeps one participation."""
        # Arrange
        campaign_service = await unit_env.get(CampaignService)
        post_id, user_id = PostId(uuid4()), UserId(uuid4())

        # Act
        first = await campaign_service.join(post_id, user_id)
        second = await campaign_service.join(post_id, user_id)

        # Assert
        assert first is True
        assert second is False
        assert await campaign_service.count_for_post(post_id) == 1
        assert await campaign_service.is_participant(post_id, user_id)

    @pytest.mark.asyncio
    async def test_join_swallows_duplicate_insert(self, unit_env):
        """A participation inserted between the check and the insert is tolerated."""
        # Arrange
        post_id, user_id = PostId(uuid4()), UserId(uuid4())

        class RacingRepository(InMemoryCampaignParticipationRepository):
            async def exists(self, post_id, user_id):
                # The concurrent insert is not visible to the check
                return False

            async def save(self, participation):
                if await super().exists(participation.post_id, participation.user_id):
                    raise IntegrityError("Duplicate participation", None, Exception())
                return await super().save(participation)

        racing = RacingRepository()
        await racing.save(CampaignParticipation.create_new(post_id, user_id))
        campaign_service = CampaignService(participation_repository=racing)

        # Act
        created = await campaign_service.join(post_id, user_id)

        # Assert
        assert created is False
        assert await racing.count_by_post(post_id) == 1

    @pytest.mark.asyncio
    async def test_count_for_posts(self, unit_env):
        """Batch counts cover every requested campaign."""
        # Arrange
        campaign_service = await unit_env.get(CampaignService)
        busy, quiet = PostId(uuid4()), PostId(uuid4())
        for _ in range(3):
            await campaign_service.join(busy, UserId(uuid4()))

        # Act
        counts = await campaign_service.count_for_posts([busy, quiet])

        # Assert
        assert counts == {busy: 3, quiet: 0}
