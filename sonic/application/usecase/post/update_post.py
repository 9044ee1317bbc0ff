"""Update post use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import (
    BaseUseCase,
    first_error_message,
    parse_id,
    parse_user_id,
)
from sonic.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from sonic.domain.service import CampaignService, LikeService, PostService
from sonic.domain.value import PostId

from .response import PostResponse


class UpdatePostRequest(BaseModel):
    """Update post request.

    The post type cannot change; campaign_goal is ignored for non-campaigns.
    """

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    is_admin: bool = False
    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None
    external_link: str | None = None
    campaign_goal: str | None = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post (author or admin)."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        campaign_service: CampaignService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
            campaign_service: Campaign domain service
        """
        self.post_service = post_service
        self.like_service = like_service
        self.campaign_service = campaign_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post is missing or deleted
            NotAuthorizedError: If the caller is neither author nor admin
            ValidationError: If title or body is blank
            ContentDeletedException: If the post is deleted
        """
        post_id = parse_id(request.post_id, PostId, "post")
        user_id = parse_user_id(request.user_id)

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("post", request.post_id)

        if not post.can_be_modified_by(user_id, request.is_admin):
            logfire.warn(
                "Unauthorized post update attempt",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(
                "You are not allowed to update this post.", "post.forbidden_update"
            )

        if not request.title or not request.title.strip():
            raise ValidationError("Title is required.", "post.title_required")
        if not request.body or not request.body.strip():
            raise ValidationError("Body is required.", "post.body_required")

        try:
            updated = post.update_content(
                title=request.title,
                body=request.body,
                tags=request.tags,
                external_link=request.external_link,
                campaign_goal=request.campaign_goal,
            )
        except ValueError as e:
            raise ValidationError(first_error_message(e), "post.invalid")

        saved = await self.post_service.save_post(updated)

        like_count = await self.like_service.count_for_post(saved.id)
        participants_count = (
            await self.campaign_service.count_for_post(saved.id)
            if saved.is_campaign
            else 0
        )
        return PostResponse.from_post(saved, like_count, participants_count)
