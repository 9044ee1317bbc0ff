"""Toggle like use case."""

from pydantic import BaseModel

from sonic.application.usecase.base import (
    BaseUseCase,
    ResponseModel,
    parse_id,
    parse_user_id,
)
from sonic.domain.error import NotFoundError
from sonic.domain.service import LikeService, PostService
from sonic.domain.value import PostId


class LikeRequest(BaseModel):
    """Like request for a post and the authenticated user."""

    post_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeStatusResponse(ResponseModel):
    """Whether the user likes the post, and the post's like count."""

    post_id: str
    like_count: int
    liked: bool


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a post.

    Toggling twice restores the original state and count.
    """

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeStatusResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        post_id = parse_id(request.post_id, PostId, "post")
        user_id = parse_user_id(request.user_id)

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("post", request.post_id)

        liked = await self.like_service.toggle(post.id, user_id)
        like_count = await self.like_service.count_for_post(post.id)

        return LikeStatusResponse(
            post_id=str(post.id), like_count=like_count, liked=liked
        )
