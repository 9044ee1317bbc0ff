"""Authentication use cases."""

from .login import LoginRequest, LoginUseCase
from .register import RegisterRequest, RegisterUseCase
from .response import AuthResponse

__all__ = [
    "AuthResponse",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
