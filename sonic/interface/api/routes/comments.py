"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status

from sonic.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from sonic.interface.api.auth import Identity, require_identity

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    identity: Identity = Depends(require_identity),
) -> Response:
    """Soft-delete a comment. Only its author or an admin may do so."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(
            comment_id=comment_id,
            user_id=identity.user_id,
            is_admin=identity.is_admin,
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
