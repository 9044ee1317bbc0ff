"""Get user profile use case."""

from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, parse_id
from sonic.domain.error import NotFoundError
from sonic.domain.service import UserService
from sonic.domain.value import UserId

from .response import PublicProfileResponse


class GetUserProfileRequest(BaseModel):
    """Get public profile request."""

    user_id: str  # UUID string


class GetUserProfileUseCase(BaseUseCase):
    """Use case for reading anyone's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> PublicProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = parse_id(request.user_id, UserId, "user")

        user = await self.user_service.get_by_id(user_id)
        if not user:
            raise NotFoundError("user", request.user_id)

        return PublicProfileResponse.from_user(user)
