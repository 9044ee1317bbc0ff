"""Campaign use cases."""

from .get_join_status import GetJoinStatusUseCase
from .join_campaign import JoinCampaignRequest, JoinCampaignUseCase, JoinStatusResponse

__all__ = [
    "GetJoinStatusUseCase",
    "JoinCampaignRequest",
    "JoinCampaignUseCase",
    "JoinStatusResponse",
]
