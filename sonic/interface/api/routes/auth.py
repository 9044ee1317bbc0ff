"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from sonic.application.usecase.auth import (
    AuthResponse,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from sonic.interface.api.schema import APIRequest

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(APIRequest):
    """API request for creating an account."""

    email: str | None = None
    password: str | None = None
    display_name: str | None = None


class LoginAPIRequest(APIRequest):
    """API request for signing in."""

    email: str | None = None
    password: str | None = None


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and sign it in.

    Args:
        request: Email, password and display name
        register_use_case: Register use case from DI

    Returns:
        The new user and an access token
    """
    return await register_use_case.execute(
        RegisterRequest(
            email=request.email,
            password=request.password,
            display_name=request.display_name,
        )
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for an access token."""
    return await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )
