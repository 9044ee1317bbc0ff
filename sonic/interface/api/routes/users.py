"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from sonic.application.usecase.user import (
    CurrentUserResponse,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    PublicProfileResponse,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from sonic.interface.api.auth import Identity, require_identity
from sonic.interface.api.schema import APIRequest

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(APIRequest):
    """API request for updating the caller's profile.

    Example:
        PUT /users/me
        {
            "displayName": "Alice",
            "bio": "Sound designer",
            "jobRole": "Producer",
            "interests": ["mixing", "synths"],
            "avatarUrl": "https://cdn.example.com/alice.png"
        }
    """

    display_name: str | None = None
    bio: str | None = None
    job_role: str | None = None
    interests: list[str] | None = None
    avatar_url: str | None = None


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    identity: Identity = Depends(require_identity),
) -> CurrentUserResponse:
    """The caller's full profile."""
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=identity.user_id)
    )


@router.put("/me", response_model=CurrentUserResponse)
async def update_current_user(
    request: UpdateProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    identity: Identity = Depends(require_identity),
) -> CurrentUserResponse:
    """Replace the caller's editable profile fields."""
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=identity.user_id,
            display_name=request.display_name,
            bio=request.bio,
            job_role=request.job_role,
            interests=request.interests,
            avatar_url=request.avatar_url,
        )
    )


@router.get("/{user_id}", response_model=PublicProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> PublicProfileResponse:
    """Public profile of any user."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id)
    )
