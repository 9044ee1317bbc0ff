"""User use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .get_user_profile import GetUserProfileRequest, GetUserProfileUseCase
from .response import CurrentUserResponse, PublicProfileResponse
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "CurrentUserResponse",
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "PublicProfileResponse",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
]
