"""Register use case."""

import logfire
from pydantic import BaseModel

from sonic.application.usecase.base import BaseUseCase, first_error_message
from sonic.domain.error import ValidationError
from sonic.domain.service import AuthService, JWTService

from .response import AuthResponse


class RegisterRequest(BaseModel):
    """Register request."""

    email: str | None = None
    password: str | None = None
    display_name: str | None = None


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing it in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration.

        Args:
            request: Register request

        Returns:
            Access token for the new user

        Raises:
            ValidationError: If a required field is blank
            ConflictError: If the email is already registered
        """
        if not request.email or not request.email.strip():
            raise ValidationError("Email is required.", "auth.email_required")
        if not request.password or not request.password.strip():
            raise ValidationError("Password is required.", "auth.password_required")
        if not request.display_name or not request.display_name.strip():
            raise ValidationError(
                "Display name is required.", "auth.displayname_required"
            )

        try:
            user = await self.auth_service.register(
                email=request.email,
                password=request.password,
                display_name=request.display_name,
            )
        except ValueError as e:
            # Entity validation (email format, display name length)
            raise ValidationError(first_error_message(e), "auth.invalid_registration")

        token, expires_at = self.jwt_service.create_token(user)
        logfire.info("Registration completed", user_id=str(user.id))
        return AuthResponse.for_user(user, token, expires_at)
