"""Login use case."""

from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase
from sonic.domain.error import ValidationError
from sonic.domain.service import AuthService, JWTService

from .response import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginUseCase(BaseUseCase):
    """Use case for email/password login."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login.

        Args:
            request: Login request

        Returns:
            Access token for the user

        Raises:
            ValidationError: If email or password is blank
            NotAuthenticatedError: If the credentials do not match
        """
        if not request.email or not request.email.strip() or not request.password:
            raise ValidationError(
                "Email and password are required.", "auth.missing_credentials"
            )

        user = await self.auth_service.authenticate(request.email, request.password)
        token, expires_at = self.jwt_service.create_token(user)
        return AuthResponse.for_user(user, token, expires_at)
