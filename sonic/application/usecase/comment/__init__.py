"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsUseCase
from .response import CommentResponse

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentResponse",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
]
