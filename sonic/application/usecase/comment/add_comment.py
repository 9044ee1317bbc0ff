"""Add comment use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import (
    BaseUseCase,
    parse_id,
    parse_user_id,
)
from sonic.domain.error import NotFoundError, ValidationError
from sonic.domain.service import CommentService, PostService, UserService
from sonic.domain.value import PostId

from .response import CommentResponse


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    body: str | None = None


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentResponse:
        """Execute add comment flow.

        The author's display name is looked up after saving; a missing
        author record leaves it empty instead of failing the request.

        Raises:
            ValidationError: If the body is blank
            NotFoundError: If the post is missing or deleted
        """
        post_id = parse_id(request.post_id, PostId, "post")
        author_id = parse_user_id(request.author_id)

        if not request.body or not request.body.strip():
            raise ValidationError("Comment body is required.", "comment.body_required")

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("post", request.post_id)

        comment = await self.comment_service.create_comment(
            post_id=post.id,
            author_id=author_id,
            body=request.body,
        )

        author = await self.user_service.get_by_id(author_id)
        if not author:
            logfire.warn("Comment author not found", author_id=str(author_id))

        return CommentResponse.from_comment(
            comment, author.display_name if author else None
        )
