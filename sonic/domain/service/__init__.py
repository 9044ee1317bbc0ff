"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .campaign_service import CampaignService
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthService",
    "CampaignService",
    "CommentService",
    "JWTService",
    "LikeService",
    "PostService",
    "Service",
    "UserService",
]
