"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from sonic.domain.error import ContentDeletedException, NotFoundError
from sonic.domain.service import CommentService
from sonic.domain.value import CommentId, PageRequest, PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCommentService:
    """Tests for comment operations."""

    @pytest.mark.asyncio
    async def test_comments_oldest_first_without_deleted(self, unit_env):
        """Listing skips deleted comments and keeps creation order."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())
        first = await comment_service.create_comment(post_id, UserId(uuid4()), "one")
        second = await comment_service.create_comment(post_id, UserId(uuid4()), "two")
        third = await comment_service.create_comment(post_id, UserId(uuid4()), "three")
        await comment_service.delete_comment(second)
        await comment_service.create_comment(PostId(uuid4()), UserId(uuid4()), "other")

        # Act
        comments, total = await comment_service.get_comments_for_post(
            post_id, PageRequest()
        )

        # Assert
        assert [c.id for c in comments] == [first.id, third.id]
        assert total == 2

    @pytest.mark.asyncio
    async def test_deleted_comment_is_hidden(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            PostId(uuid4()), UserId(uuid4()), "bye"
        )

        # Act
        await comment_service.delete_comment(comment)

        # Assert
        assert await comment_service.get_comment_by_id(comment.id) is None
        hidden = await comment_service.get_comment_by_id(
            comment.id, include_deleted=True
        )
        assert hidden.is_deleted

    @pytest.mark.asyncio
    async def test_update_body(self, unit_env):
        """Editing replaces the body and stamps updated_at."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            PostId(uuid4()), UserId(uuid4()), "draft"
        )

        # Act
        edited = await comment_service.update_body(comment.id, " final ")

        # Assert
        assert edited.body == "final"
        assert edited.updated_at is not None
        stored = await comment_service.get_comment_by_id(comment.id)
        assert stored.body == "final"

    @pytest.mark.asyncio
    async def test_update_body_of_deleted_comment_raises(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            PostId(uuid4()), UserId(uuid4()), "draft"
        )
        await comment_service.delete_comment(comment)

        # Act & Assert
        with pytest.raises(ContentDeletedException):
            await comment_service.update_body(comment.id, "edit")

    @pytest.mark.asyncio
    async def test_update_body_of_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_body(CommentId(uuid4()), "edit")
