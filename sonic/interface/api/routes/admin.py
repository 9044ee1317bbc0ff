"""Admin moderation routes.

Every route requires a token whose role claim is Admin.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status

from sonic.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from sonic.application.usecase.post import (
    DeletePostRequest,
    DeletePostUseCase,
    SetFeaturedRequest,
    SetFeaturedUseCase,
)
from sonic.interface.api.auth import Identity, require_admin

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def force_delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    identity: Identity = Depends(require_admin),
) -> Response:
    """Soft-delete any post."""
    await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=identity.user_id, is_admin=True)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def force_delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    identity: Identity = Depends(require_admin),
) -> Response:
    """Soft-delete any comment."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(
            comment_id=comment_id, user_id=identity.user_id, is_admin=True
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/posts/{post_id}/feature", status_code=status.HTTP_204_NO_CONTENT)
async def feature_post(
    post_id: str,
    set_featured_use_case: FromDishka[SetFeaturedUseCase],
    identity: Identity = Depends(require_admin),
) -> Response:
    """Mark a post as featured."""
    await set_featured_use_case.execute(
        SetFeaturedRequest(post_id=post_id, is_featured=True)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/posts/{post_id}/unfeature", status_code=status.HTTP_204_NO_CONTENT)
async def unfeature_post(
    post_id: str,
    set_featured_use_case: FromDishka[SetFeaturedUseCase],
    identity: Identity = Depends(require_admin),
) -> Response:
    """Remove a post from the featured set."""
    await set_featured_use_case.execute(
        SetFeaturedRequest(post_id=post_id, is_featured=False)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
