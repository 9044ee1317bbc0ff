"""Unit tests for SetFeaturedUseCase."""

from uuid import uuid4

import pytest

from sonic.application.usecase.post import SetFeaturedRequest, SetFeaturedUseCase
from sonic.domain.error import ContentDeletedException, NotFoundError
from sonic.domain.repository import PostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSetFeaturedUseCase:
    """Tests for SetFeaturedUseCase."""

    @pytest.mark.asyncio
    async def test_feature_and_unfeature(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        use_case = await unit_env.get(SetFeaturedUseCase)

        # Act & Assert
        await use_case.execute(SetFeaturedRequest(post_id=str(post.id), is_featured=True))
        assert (await post_repo.find_by_id(post.id)).is_featured is True

        await use_case.execute(
            SetFeaturedRequest(post_id=str(post.id), is_featured=False)
        )
        assert (await post_repo.find_by_id(post.id)).is_featured is False

    @pytest.mark.asyncio
    async def test_deleted_post_rejected(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post().mark_deleted())
        use_case = await unit_env.get(SetFeaturedUseCase)

        # Act & Assert
        with pytest.raises(ContentDeletedException) as exc_info:
            await use_case.execute(
                SetFeaturedRequest(post_id=str(post.id), is_featured=True)
            )
        assert exc_info.value.code == "post.deleted"

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(SetFeaturedUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SetFeaturedRequest(post_id=str(uuid4()), is_featured=True)
            )
