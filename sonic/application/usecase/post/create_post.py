"""Create post use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import (
    BaseUseCase,
    first_error_message,
    parse_user_id,
)
from sonic.domain.error import ValidationError
from sonic.domain.model import Post
from sonic.domain.service import PostService
from sonic.domain.value import PostType

from .response import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    type: PostType
    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None
    external_link: str | None = None
    campaign_goal: str | None = None  # Only kept for campaigns


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        A new post has no likes or participants, so counts start at zero
        without querying.

        Args:
            request: Create post request

        Returns:
            Created post

        Raises:
            ValidationError: If title or body is blank
        """
        author_id = parse_user_id(request.author_id)

        if not request.title or not request.title.strip():
            raise ValidationError("Title is required.", "post.title_required")
        if not request.body or not request.body.strip():
            raise ValidationError("Body is required.", "post.body_required")

        try:
            post = Post.create_new(
                type=request.type,
                title=request.title,
                body=request.body,
                author_id=author_id,
                tags=request.tags,
                external_link=request.external_link,
                campaign_goal=request.campaign_goal,
            )
        except ValueError as e:
            raise ValidationError(first_error_message(e), "post.invalid")

        saved = await self.post_service.save_post(post)
        logfire.info(
            "Post created",
            post_id=str(saved.id),
            type=saved.type.value,
            author_id=str(author_id),
        )
        return PostResponse.from_post(saved)
