"""Unit tests for JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from sonic.config import AuthSettings
from sonic.util.error import ConfigurationError
from sonic.util.jwt import (
    JWTError,
    create_token,
    token_lifetime,
    validate_auth_settings,
    verify_token,
)

SECRET = "x" * 40


def _settings(**overrides) -> AuthSettings:
    return AuthSettings(jwt_secret=SECRET, **overrides)


def _issue(settings: AuthSettings) -> str:
    token, _ = create_token(
        user_id="0b7c5f3e-9d1a-4c39-9a55-1c1f3c9b1e11",
        email="alice@example.com",
        display_name="Alice",
        role="User",
        settings=settings,
    )
    return token


class TestCreateToken:
    """Tests for token issuance."""

    def test_claims(self):
        """Tokens carry identity, role and standard claims."""
        settings = _settings()
        token = _issue(settings)

        claims = jwt.decode(
            token,
            SECRET,
            algorithms=["HS256"],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )

        assert claims["sub"] == "0b7c5f3e-9d1a-4c39-9a55-1c1f3c9b1e11"
        assert claims["email"] == "alice@example.com"
        assert claims["name"] == "Alice"
        assert claims["role"] == "User"
        assert {"jti", "iat", "nbf", "exp"} <= claims.keys()

    def test_expiry_uses_configured_lifetime(self):
        """Expiry is now plus the configured minutes."""
        before = datetime.now(timezone.utc)
        _, expires_at = create_token(
            "id", "a@b.c", "A", "User", _settings(access_token_minutes=15)
        )

        assert before + timedelta(minutes=14) < expires_at
        assert expires_at <= datetime.now(timezone.utc) + timedelta(minutes=15)

    @pytest.mark.parametrize("minutes", [0, -10])
    def test_non_positive_lifetime_falls_back_to_an_hour(self, minutes):
        assert token_lifetime(_settings(access_token_minutes=minutes)) == timedelta(
            minutes=60
        )


class TestVerifyToken:
    """Tests for token verification."""

    def test_valid_token(self):
        settings = _settings()

        payload = verify_token(_issue(settings), settings)

        assert payload.email == "alice@example.com"
        assert payload.role == "User"

    def test_wrong_audience_is_rejected(self):
        token = _issue(_settings())

        with pytest.raises(JWTError):
            verify_token(token, _settings(jwt_audience="someone-else"))

    def test_wrong_issuer_is_rejected(self):
        token = _issue(_settings())

        with pytest.raises(JWTError):
            verify_token(token, _settings(jwt_issuer="other-issuer"))

    def test_tampered_signature_is_rejected(self):
        token = _issue(_settings())

        with pytest.raises(JWTError):
            verify_token(token, AuthSettings(jwt_secret="y" * 40))

    def test_expired_token_is_rejected(self):
        settings = _settings()
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode(
            {
                "sub": "id",
                "iat": past,
                "nbf": past,
                "exp": past + timedelta(minutes=5),
                "iss": settings.jwt_issuer,
                "aud": settings.jwt_audience,
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)


class TestValidateAuthSettings:
    """Tests for signing configuration checks."""

    def test_short_secret_is_rejected(self):
        with pytest.raises(ConfigurationError):
            validate_auth_settings(AuthSettings(jwt_secret="too-short"))

    def test_missing_issuer_is_rejected(self):
        with pytest.raises(ConfigurationError):
            validate_auth_settings(_settings(jwt_issuer=""))

    def test_default_settings_are_usable(self):
        validate_auth_settings(AuthSettings())
