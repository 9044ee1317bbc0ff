"""Update user profile use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import (
    BaseUseCase,
    first_error_message,
    parse_user_id,
)
from sonic.domain.error import NotFoundError, ValidationError
from sonic.domain.model.common import clean_optional, is_absolute_url
from sonic.domain.service import UserService

from .response import CurrentUserResponse

# Limits of the profile form; tighter than what the entity accepts
MAX_DISPLAY_NAME_LENGTH = 50
MAX_BIO_LENGTH = 500
MAX_JOB_ROLE_LENGTH = 80
MAX_AVATAR_URL_LENGTH = 300


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Text fields are replaced (blank clears them). Interests are kept when
    not provided.
    """

    user_id: str  # From authenticated user
    display_name: str | None = None
    bio: str | None = None
    job_role: str | None = None
    interests: list[str] | None = None
    avatar_url: str | None = None


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for updating the authenticated user's profile.

    Email, password and role cannot be changed through this use case.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> CurrentUserResponse:
        """Execute update user profile flow.

        Args:
            request: Request with user ID and new profile fields

        Returns:
            Updated profile

        Raises:
            ValidationError: If a field is missing, too long or malformed
            NotFoundError: If the user does not exist
        """
        user_id = parse_user_id(request.user_id)

        display_name = clean_optional(request.display_name)
        bio = clean_optional(request.bio)
        job_role = clean_optional(request.job_role)
        avatar_url = clean_optional(request.avatar_url)

        if not display_name:
            raise ValidationError(
                "Display name is required.", "user.display_name_required"
            )
        if len(display_name) > MAX_DISPLAY_NAME_LENGTH:
            raise ValidationError(
                f"Display name must be at most {MAX_DISPLAY_NAME_LENGTH} characters.",
                "user.display_name_too_long",
            )
        if bio and len(bio) > MAX_BIO_LENGTH:
            raise ValidationError(
                f"Bio must be at most {MAX_BIO_LENGTH} characters.", "user.bio_too_long"
            )
        if job_role and len(job_role) > MAX_JOB_ROLE_LENGTH:
            raise ValidationError(
                f"Job role must be at most {MAX_JOB_ROLE_LENGTH} characters.",
                "user.job_role_too_long",
            )
        if avatar_url:
            if len(avatar_url) > MAX_AVATAR_URL_LENGTH:
                raise ValidationError(
                    f"Avatar URL must be at most {MAX_AVATAR_URL_LENGTH} characters.",
                    "user.avatar_url_too_long",
                )
            if not is_absolute_url(avatar_url):
                raise ValidationError(
                    "Avatar URL must be an absolute URL.", "user.avatar_url_invalid"
                )

        user = await self.user_service.get_by_id(user_id)
        if not user:
            raise NotFoundError("user", request.user_id)

        try:
            updated = user.update_profile(
                display_name=display_name,
                bio=bio,
                job_role=job_role,
                interests=(
                    request.interests
                    if request.interests is not None
                    else user.interests
                ),
                avatar_url=avatar_url,
            )
        except ValueError as e:
            raise ValidationError(first_error_message(e), "user.invalid_profile")

        saved = await self.user_service.save_user(updated)
        logfire.info("Profile updated", user_id=str(saved.id))
        return CurrentUserResponse.from_user(saved)
