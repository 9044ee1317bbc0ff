"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_feed import GetFeedRequest, GetFeedUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .response import PostResponse
from .set_featured import SetFeaturedRequest, SetFeaturedUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetFeedRequest",
    "GetFeedUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "PostResponse",
    "SetFeaturedRequest",
    "SetFeaturedUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
