"""Bearer token authentication for routes."""

from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from sonic.domain.error import NotAuthenticatedError, NotAuthorizedError
from sonic.domain.service import JWTService
from sonic.domain.value import UserRole
from sonic.util.jwt import JWTError

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as stated by the access token."""

    user_id: str
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return UserRole.is_admin_claim(self.role)


async def require_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity:
    """Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        NotAuthenticatedError: If the header is missing or the token is invalid
    """
    if credentials is None or not credentials.credentials.strip():
        raise NotAuthenticatedError("Authentication required.", "auth.missing_token")

    # The request container is attached by the dishka middleware
    jwt_service = await request.state.dishka_container.get(JWTService)
    try:
        payload = jwt_service.verify_token(credentials.credentials.strip())
    except JWTError as e:
        raise NotAuthenticatedError(str(e), "auth.invalid_token")

    return Identity(user_id=payload.user_id, email=payload.email, role=payload.role)


async def require_admin(identity: Identity = Depends(require_identity)) -> Identity:
    """Resolve the caller and require the Admin role.

    Raises:
        NotAuthorizedError: If the caller is not an admin
    """
    if not identity.is_admin:
        raise NotAuthorizedError("Admin role required.", "auth.admin_required")
    return identity
