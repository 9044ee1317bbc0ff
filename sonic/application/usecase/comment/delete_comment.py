"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, parse_id, parse_user_id
from sonic.domain.error import NotAuthorizedError, NotFoundError
from sonic.domain.service import CommentService
from sonic.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    is_admin: bool = False


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft deleting a comment (author or admin)."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment is missing or already deleted
            NotAuthorizedError: If the caller is neither author nor admin
        """
        comment_id = parse_id(request.comment_id, CommentId, "comment")
        user_id = parse_user_id(request.user_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("comment", request.comment_id)

        if not comment.can_be_deleted_by(user_id, request.is_admin):
            logfire.warn(
                "Unauthorized comment delete attempt",
                comment_id=str(comment_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(
                "You are not allowed to delete this comment.",
                "comment.forbidden_delete",
            )

        await self.comment_service.delete_comment(comment)
