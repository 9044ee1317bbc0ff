"""Unit tests for RegisterUseCase."""

import pytest

from sonic.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from sonic.domain.error import ConflictError, ValidationError
from sonic.domain.service import JWTService
from sonic.domain.value import UserRole
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_token(self, unit_env):
        """A new account is signed in straight away."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(
            RegisterRequest(
                email="Carol@Example.com", password="pa55word!", display_name="Carol"
            )
        )

        # Assert
        assert response.email == "carol@example.com"
        assert response.role is UserRole.USER
        payload = jwt_service.verify_token(response.access_token)
        assert payload.user_id == response.user_id
        assert payload.role == "User"

    @pytest.mark.asyncio
    async def test_long_password_accepted(self, unit_env):
        """Passwords are not limited in length."""
        # Arrange
        password = "correct-horse-battery-staple-" * 3
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)

        # Act
        registered = await register.execute(
            RegisterRequest(
                email="long@example.com", password=password, display_name="Long"
            )
        )
        response = await login.execute(
            LoginRequest(email="long@example.com", password=password)
        )

        # Assert
        assert len(password) > 80
        assert response.user_id == registered.user_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("email", "password", "display_name", "code"),
        [
            ("", "pa55word!", "Carol", "auth.email_required"),
            ("carol@example.com", "   ", "Carol", "auth.password_required"),
            ("carol@example.com", "pa55word!", None, "auth.displayname_required"),
            ("not-an-email", "pa55word!", "Carol", "auth.invalid_registration"),
        ],
    )
    async def test_invalid_input(self, unit_env, email, password, display_name, code):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                RegisterRequest(
                    email=email, password=password, display_name=display_name
                )
            )
        assert exc_info.value.code == code

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        await use_case.execute(
            RegisterRequest(
                email="carol@example.com", password="pa55word!", display_name="Carol"
            )
        )

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(
                RegisterRequest(
                    email="CAROL@example.com", password="x1234567", display_name="C"
                )
            )
        assert exc_info.value.code == "auth.email_in_use"
