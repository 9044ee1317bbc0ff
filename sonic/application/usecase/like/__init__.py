"""Like use cases."""

from .get_like_status import GetLikeStatusUseCase
from .toggle_like import LikeRequest, LikeStatusResponse, ToggleLikeUseCase

__all__ = [
    "GetLikeStatusUseCase",
    "LikeRequest",
    "LikeStatusResponse",
    "ToggleLikeUseCase",
]
