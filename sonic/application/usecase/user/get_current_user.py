"""Get current user use case."""

from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, parse_user_id
from sonic.domain.error import NotFoundError
from sonic.domain.service import UserService

from .response import CurrentUserResponse


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the access token subject


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for reading the authenticated user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> CurrentUserResponse:
        """Execute get current user flow.

        Raises:
            NotAuthenticatedError: If the token subject is malformed
            NotFoundError: If the user no longer exists
        """
        user_id = parse_user_id(request.user_id)

        user = await self.user_service.get_by_id(user_id)
        if not user:
            raise NotFoundError("user", request.user_id)

        return CurrentUserResponse.from_user(user)
