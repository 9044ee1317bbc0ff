"""Post response shared by the post use cases."""

from datetime import datetime

from sonic.application.usecase.base import ResponseModel
from sonic.domain.model import Post
from sonic.domain.service import CampaignService, LikeService
from sonic.domain.value import PostType


class PostResponse(ResponseModel):
    """Post with its live engagement counts."""

    id: str
    type: PostType
    title: str
    body: str
    tags: list[str]
    external_link: str | None
    author_id: str
    created_at: datetime
    updated_at: datetime
    is_featured: bool
    like_count: int
    campaign_goal: str | None
    participants_count: int

    @classmethod
    def from_post(
        cls, post: Post, like_count: int = 0, participants_count: int = 0
    ) -> "PostResponse":
        """Map a post and its counts to a response."""
        return cls(
            id=str(post.id),
            type=post.type,
            title=post.title,
            body=post.body,
            tags=list(post.tags),
            external_link=post.external_link,
            author_id=str(post.author_id),
            created_at=post.created_at,
            updated_at=post.updated_at,
            is_featured=post.is_featured,
            like_count=like_count,
            campaign_goal=post.campaign_goal,
            participants_count=participants_count if post.is_campaign else 0,
        )


async def build_post_responses(
    posts: list[Post],
    like_service: LikeService,
    campaign_service: CampaignService,
) -> list[PostResponse]:
    """Map posts to responses, counting likes and participants in batches.

    Counts are read at call time, they are not stored on the post.
    """
    post_ids = [post.id for post in posts]
    campaign_ids = [post.id for post in posts if post.is_campaign]

    like_counts = await like_service.count_for_posts(post_ids)
    participant_counts = await campaign_service.count_for_posts(campaign_ids)

    return [
        PostResponse.from_post(
            post,
            like_count=like_counts.get(post.id, 0),
            participants_count=participant_counts.get(post.id, 0),
        )
        for post in posts
    ]
