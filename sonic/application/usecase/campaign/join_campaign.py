"""Join campaign use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import (
    BaseUseCase,
    ResponseModel,
    parse_id,
    parse_user_id,
)
from sonic.domain.error import NotFoundError, ValidationError
from sonic.domain.model import Post
from sonic.domain.service import CampaignService, PostService
from sonic.domain.value import PostId


class JoinCampaignRequest(BaseModel):
    """Join request for a campaign and the authenticated user."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class JoinStatusResponse(ResponseModel):
    """Campaign membership of the user and the participant count.

    joined is True whenever the user is a participant, including when an
    earlier call made them one.
    """

    post_id: str
    participants_count: int
    joined: bool


async def get_campaign(post_service: PostService, post_id: str) -> Post:
    """Load a campaign post.

    Raises:
        NotFoundError: If the post is missing or deleted
        ValidationError: If the post is not a campaign
    """
    parsed_id = parse_id(post_id, PostId, "campaign")

    post = await post_service.get_post_by_id(parsed_id)
    if not post:
        raise NotFoundError("campaign", post_id)
    if not post.is_campaign:
        raise ValidationError(
            "Target post is not a campaign.", "campaign.invalid_type"
        )
    return post


class JoinCampaignUseCase(BaseUseCase):
    """Use case for joining a campaign. Joining again is a no-op."""

    def __init__(
        self, post_service: PostService, campaign_service: CampaignService
    ) -> None:
        """Initialize join campaign use case.

        Args:
            post_service: Post domain service
            campaign_service: Campaign domain service
        """
        self.post_service = post_service
        self.campaign_service = campaign_service

    async def execute(self, request: JoinCampaignRequest) -> JoinStatusResponse:
        """Execute join campaign flow.

        Raises:
            NotFoundError: If the campaign is missing or deleted
            ValidationError: If the post is not a campaign
        """
        user_id = parse_user_id(request.user_id)
        post = await get_campaign(self.post_service, request.post_id)

        joined_now = await self.campaign_service.join(post.id, user_id)
        participants_count = await self.campaign_service.count_for_post(post.id)

        logfire.info(
            "Join campaign handled",
            post_id=str(post.id),
            user_id=str(user_id),
            joined_now=joined_now,
        )
        return JoinStatusResponse(
            post_id=str(post.id),
            participants_count=participants_count,
            joined=True,
        )
