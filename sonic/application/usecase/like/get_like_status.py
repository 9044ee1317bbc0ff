"""Get like status use case."""

from sonic.application.usecase.base import BaseUseCase, parse_id, parse_user_id
from sonic.domain.error import NotFoundError
from sonic.domain.service import LikeService, PostService
from sonic.domain.value import PostId

from .toggle_like import LikeRequest, LikeStatusResponse


class GetLikeStatusUseCase(BaseUseCase):
    """Use case for reading like state without changing it."""

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        """Initialize get like status use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: LikeRequest) -> LikeStatusResponse:
        """Execute get like status flow.

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        post_id = parse_id(request.post_id, PostId, "post")
        user_id = parse_user_id(request.user_id)

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("post", request.post_id)

        return LikeStatusResponse(
            post_id=str(post.id),
            like_count=await self.like_service.count_for_post(post.id),
            liked=await self.like_service.is_liked(post.id, user_id),
        )
