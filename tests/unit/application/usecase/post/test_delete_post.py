"""Unit tests for DeletePostUseCase."""

from uuid import uuid4

import pytest

from sonic.application.usecase.post import (
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
)
from sonic.domain.error import NotAuthorizedError, NotFoundError
from sonic.domain.model import CampaignParticipation, Like
from sonic.domain.repository import (
    CampaignParticipationRepository,
    LikeRepository,
    PostRepository,
)
from sonic.domain.value import UserId
from tests.conftest import make_campaign, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_likes(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        like_repo = await unit_env.get(LikeRepository)
        post = await post_repo.save(make_post())
        await like_repo.save(Like.create_new(post.id, UserId(uuid4())))
        use_case = await unit_env.get(DeletePostUseCase)

        # Act
        await use_case.execute(
            DeletePostRequest(post_id=str(post.id), user_id=str(post.author_id))
        )

        # Assert
        stored = await post_repo.find_by_id(post.id, include_deleted=True)
        assert stored.is_deleted is True
        assert await like_repo.count_by_post(post.id) == 1

        get_post = await unit_env.get(GetPostUseCase)
        with pytest.raises(NotFoundError):
            await get_post.execute(GetPostRequest(post_id=str(post.id)))

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_participations(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        participation_repo = await unit_env.get(CampaignParticipationRepository)
        campaign = await post_repo.save(make_campaign())
        for _ in range(2):
            await participation_repo.save(
                CampaignParticipation.create_new(campaign.id, UserId(uuid4()))
            )
        use_case = await unit_env.get(DeletePostUseCase)

        # Act
        await use_case.execute(
            DeletePostRequest(post_id=str(campaign.id), user_id=str(campaign.author_id))
        )

        # Assert
        assert await post_repo.find_by_id(campaign.id) is None
        assert await participation_repo.count_by_post(campaign.id) == 2

    @pytest.mark.asyncio
    async def test_non_author_forbidden(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        use_case = await unit_env.get(DeletePostUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError) as exc_info:
            await use_case.execute(
                DeletePostRequest(post_id=str(post.id), user_id=str(uuid4()))
            )
        assert exc_info.value.code == "post.forbidden_delete"

    @pytest.mark.asyncio
    async def test_admin_delete(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        use_case = await unit_env.get(DeletePostUseCase)

        # Act
        await use_case.execute(
            DeletePostRequest(post_id=str(post.id), user_id=str(uuid4()), is_admin=True)
        )

        # Assert
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeletePostRequest(post_id=str(uuid4()), user_id=str(uuid4()))
            )
