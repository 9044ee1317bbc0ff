"""Campaign routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from sonic.application.usecase.base import PagedResponse
from sonic.application.usecase.campaign import (
    GetJoinStatusUseCase,
    JoinCampaignRequest,
    JoinCampaignUseCase,
    JoinStatusResponse,
)
from sonic.application.usecase.post import (
    GetFeedRequest,
    GetFeedUseCase,
    PostResponse,
)
from sonic.domain.value import PostType
from sonic.interface.api.auth import Identity, require_identity

router = APIRouter(prefix="/campaigns", tags=["campaigns"], route_class=DishkaRoute)


@router.get("", response_model=PagedResponse[PostResponse])
async def get_campaigns(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    page: int = 1,
    page_size: int = Query(default=10, alias="pageSize"),
    tag: list[str] | None = Query(default=None),
    q: str | None = None,
    featured: bool | None = None,
) -> PagedResponse[PostResponse]:
    """The feed restricted to campaign posts."""
    return await get_feed_use_case.execute(
        GetFeedRequest(
            page=page,
            page_size=page_size,
            type=PostType.CAMPAIGN,
            tags=tag,
            search=q,
            featured=featured,
        )
    )


@router.post("/{post_id}/join", response_model=JoinStatusResponse)
async def join_campaign(
    post_id: str,
    join_campaign_use_case: FromDishka[JoinCampaignUseCase],
    identity: Identity = Depends(require_identity),
) -> JoinStatusResponse:
    """Join a campaign. Joining twice is harmless."""
    return await join_campaign_use_case.execute(
        JoinCampaignRequest(post_id=post_id, user_id=identity.user_id)
    )


@router.get("/{post_id}/join", response_model=JoinStatusResponse)
async def get_join_status(
    post_id: str,
    get_join_status_use_case: FromDishka[GetJoinStatusUseCase],
    identity: Identity = Depends(require_identity),
) -> JoinStatusResponse:
    """Whether the caller participates in the campaign."""
    return await get_join_status_use_case.execute(
        JoinCampaignRequest(post_id=post_id, user_id=identity.user_id)
    )
