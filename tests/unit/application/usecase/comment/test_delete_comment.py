"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from sonic.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from sonic.domain.error import NotAuthorizedError, NotFoundError
from sonic.domain.model import Comment
from sonic.domain.repository import CommentRepository
from sonic.domain.value import PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _stored_comment(unit_env) -> Comment:
    comment_repo = await unit_env.get(CommentRepository)
    comment = Comment.create_new(
        post_id=PostId(uuid4()), author_id=UserId(uuid4()), body="Nice patch"
    )
    return await comment_repo.save(comment)


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes(self, unit_env):
        # Arrange
        comment = await _stored_comment(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act
        await use_case.execute(
            DeleteCommentRequest(
                comment_id=str(comment.id), user_id=str(comment.author_id)
            )
        )

        # Assert
        assert await comment_repo.find_by_id(comment.id) is None
        stored = await comment_repo.find_by_id(comment.id, include_deleted=True)
        assert stored.is_deleted is True

    @pytest.mark.asyncio
    async def test_admin_deletes(self, unit_env):
        # Arrange
        comment = await _stored_comment(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act
        await use_case.execute(
            DeleteCommentRequest(
                comment_id=str(comment.id), user_id=str(uuid4()), is_admin=True
            )
        )

        # Assert
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_other_user_forbidden(self, unit_env):
        # Arrange
        comment = await _stored_comment(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError) as exc_info:
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), user_id=str(uuid4()))
            )
        assert exc_info.value.code == "comment.forbidden_delete"

    @pytest.mark.asyncio
    async def test_second_delete_not_found(self, unit_env):
        # Arrange
        comment = await _stored_comment(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)
        request = DeleteCommentRequest(
            comment_id=str(comment.id), user_id=str(comment.author_id)
        )
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(request)
        assert exc_info.value.code == "comment.not_found"
