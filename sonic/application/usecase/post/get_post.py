"""Get post use case."""

from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, parse_id
from sonic.domain.error import NotFoundError
from sonic.domain.service import CampaignService, LikeService, PostService
from sonic.domain.value import PostId

from .response import PostResponse


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post with its counts."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        campaign_service: CampaignService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
            campaign_service: Campaign domain service
        """
        self.post_service = post_service
        self.like_service = like_service
        self.campaign_service = campaign_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        post_id = parse_id(request.post_id, PostId, "post")

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("post", request.post_id)

        like_count = await self.like_service.count_for_post(post.id)
        participants_count = (
            await self.campaign_service.count_for_post(post.id)
            if post.is_campaign
            else 0
        )
        return PostResponse.from_post(post, like_count, participants_count)
