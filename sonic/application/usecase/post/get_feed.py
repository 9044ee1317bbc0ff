"""Get feed use case."""

from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, PagedResponse
from sonic.domain.repository import PostFeedFilter
from sonic.domain.service import CampaignService, LikeService, PostService
from sonic.domain.value import PageRequest, PostType

from .response import PostResponse, build_post_responses


class GetFeedRequest(BaseModel):
    """Get feed request.

    page and page_size are normalized, never rejected.
    """

    page: int = 1
    page_size: int = 10
    type: PostType | None = None
    tags: list[str] | None = None  # any-of
    search: str | None = None
    featured: bool | None = None


class GetFeedUseCase(BaseUseCase):
    """Use case for the paginated, filterable post feed."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        campaign_service: CampaignService,
    ) -> None:
        """Initialize get feed use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
            campaign_service: Campaign domain service
        """
        self.post_service = post_service
        self.like_service = like_service
        self.campaign_service = campaign_service

    async def execute(self, request: GetFeedRequest) -> PagedResponse[PostResponse]:
        """Execute get feed flow.

        Args:
            request: Feed filters and page

        Returns:
            Page of posts, newest first, with the total before pagination
        """
        page = PageRequest(page=request.page, page_size=request.page_size)
        feed_filter = PostFeedFilter(
            type=request.type,
            tags=request.tags,
            search=request.search,
            featured=request.featured,
        )

        posts, total = await self.post_service.get_feed(feed_filter, page)
        items = await build_post_responses(
            posts, self.like_service, self.campaign_service
        )
        return PagedResponse[PostResponse].build(items, page, total)
