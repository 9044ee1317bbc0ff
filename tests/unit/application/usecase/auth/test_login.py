"""Unit tests for LoginUseCase."""

import pytest

from sonic.application.usecase.auth import LoginRequest, LoginUseCase
from sonic.domain.error import NotAuthenticatedError, ValidationError
from sonic.domain.repository import UserRepository
from tests.conftest import TEST_PASSWORD, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_success(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("dave@example.com", "Dave"))
        use_case = await unit_env.get(LoginUseCase)

        # Act
        response = await use_case.execute(
            LoginRequest(email="DAVE@example.com", password=TEST_PASSWORD)
        )

        # Assert
        assert response.user_id == str(user.id)
        assert response.display_name == "Dave"
        assert response.access_token

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("dave@example.com", "Dave"))
        use_case = await unit_env.get(LoginUseCase)

        # Act & Assert
        with pytest.raises(NotAuthenticatedError) as exc_info:
            await use_case.execute(
                LoginRequest(email="dave@example.com", password="not-it")
            )
        assert exc_info.value.code == "auth.invalid_credentials"
        assert exc_info.value.message == "Invalid email or password."

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("email", "password"), [("", "x"), ("a@b.c", None)])
    async def test_missing_credentials(self, unit_env, email, password):
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(LoginRequest(email=email, password=password))

        assert exc_info.value.code == "auth.missing_credentials"
