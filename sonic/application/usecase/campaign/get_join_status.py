"""Get join status use case."""

from sonic.application.usecase.base import BaseUseCase, parse_user_id
from sonic.domain.service import CampaignService, PostService

from .join_campaign import JoinCampaignRequest, JoinStatusResponse, get_campaign


class GetJoinStatusUseCase(BaseUseCase):
    """Use case for reading campaign membership without joining."""

    def __init__(
        self, post_service: PostService, campaign_service: CampaignService
    ) -> None:
        """Initialize get join status use case.

        Args:
            post_service: Post domain service
            campaign_service: Campaign domain service
        """
        self.post_service = post_service
        self.campaign_service = campaign_service

    async def execute(self, request: JoinCampaignRequest) -> JoinStatusResponse:
        """Execute get join status flow.

        Raises:
            NotFoundError: If the campaign is missing or deleted
            ValidationError: If the post is not a campaign
        """
        user_id = parse_user_id(request.user_id)
        post = await get_campaign(self.post_service, request.post_id)

        return JoinStatusResponse(
            post_id=str(post.id),
            participants_count=await self.campaign_service.count_for_post(post.id),
            joined=await self.campaign_service.is_participant(post.id, user_id),
        )
