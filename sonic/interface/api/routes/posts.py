"""Post routes, including likes and comments on a post."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response, status

from sonic.application.usecase.base import PagedResponse
from sonic.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentResponse,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from sonic.application.usecase.like import (
    GetLikeStatusUseCase,
    LikeRequest,
    LikeStatusResponse,
    ToggleLikeUseCase,
)
from sonic.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetFeedRequest,
    GetFeedUseCase,
    GetPostRequest,
    GetPostUseCase,
    PostResponse,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from sonic.domain.value import PostType
from sonic.interface.api.auth import Identity, require_identity
from sonic.interface.api.schema import APIRequest

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class PostAPIRequest(APIRequest):
    """API request for creating or editing a post."""

    type: PostType = PostType.EXPERIENCE
    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None
    external_link: str | None = None
    campaign_goal: str | None = None


class CommentAPIRequest(APIRequest):
    """API request for adding a comment."""

    body: str | None = None


@router.get("", response_model=PagedResponse[PostResponse])
async def get_feed(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    page: int = 1,
    page_size: int = Query(default=10, alias="pageSize"),
    type: PostType | None = None,
    tag: list[str] | None = Query(default=None),
    q: str | None = None,
    featured: bool | None = None,
) -> PagedResponse[PostResponse]:
    """Newest-first feed of posts.

    Args:
        get_feed_use_case: Feed use case from DI
        page: 1-based page number
        page_size: Items per page
        type: Only posts of this type
        tag: Only posts carrying any of these tags (repeatable)
        q: Case-insensitive text searched in title and body
        featured: Only featured (true) or non-featured (false) posts

    Returns:
        One page of posts with counts
    """
    return await get_feed_use_case.execute(
        GetFeedRequest(
            page=page,
            page_size=page_size,
            type=type,
            tags=tag,
            search=q,
            featured=featured,
        )
    )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    identity: Identity = Depends(require_identity),
) -> PostResponse:
    """Publish a post as the authenticated user."""
    return await create_post_use_case.execute(
        CreatePostRequest(
            author_id=identity.user_id,
            type=request.type,
            title=request.title,
            body=request.body,
            tags=request.tags,
            external_link=request.external_link,
            campaign_goal=request.campaign_goal,
        )
    )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Fetch one post with its like and participant counts."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: PostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    identity: Identity = Depends(require_identity),
) -> PostResponse:
    """Edit a post. Only its author or an admin may do so.

    The post type is fixed at creation; a type in the body is ignored.
    """
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            user_id=identity.user_id,
            is_admin=identity.is_admin,
            title=request.title,
            body=request.body,
            tags=request.tags,
            external_link=request.external_link,
            campaign_goal=request.campaign_goal,
        )
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    identity: Identity = Depends(require_identity),
) -> Response:
    """Soft-delete a post. Only its author or an admin may do so."""
    await delete_post_use_case.execute(
        DeletePostRequest(
            post_id=post_id, user_id=identity.user_id, is_admin=identity.is_admin
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/like", response_model=LikeStatusResponse)
async def toggle_like(
    post_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    identity: Identity = Depends(require_identity),
) -> LikeStatusResponse:
    """Like the post, or remove the caller's like if present."""
    return await toggle_like_use_case.execute(
        LikeRequest(post_id=post_id, user_id=identity.user_id)
    )


@router.get("/{post_id}/like", response_model=LikeStatusResponse)
async def get_like_status(
    post_id: str,
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    identity: Identity = Depends(require_identity),
) -> LikeStatusResponse:
    """Whether the caller likes the post, and its like count."""
    return await get_like_status_use_case.execute(
        LikeRequest(post_id=post_id, user_id=identity.user_id)
    )


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    request: CommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    identity: Identity = Depends(require_identity),
) -> CommentResponse:
    """Comment on a post."""
    return await add_comment_use_case.execute(
        AddCommentRequest(
            post_id=post_id, author_id=identity.user_id, body=request.body
        )
    )


@router.get("/{post_id}/comments", response_model=PagedResponse[CommentResponse])
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    page: int = 1,
    page_size: int = Query(default=10, alias="pageSize"),
) -> PagedResponse[CommentResponse]:
    """Comments on a post, oldest first."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(post_id=post_id, page=page, page_size=page_size)
    )
