"""Domain layer errors.

Every domain error carries a human-readable message and a stable,
machine-readable ``code`` (for example ``post.not_found``) that clients
can branch on.
"""


class DomainError(Exception):
    """Base domain error."""

    default_code = "domain.error"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class ValidationError(DomainError):
    """Input is missing or invalid."""

    default_code = "validation.failed"


class ContentDeletedException(DomainError):
    """Raised when attempting to change deleted content."""

    def __init__(self, message: str, code: str):
        super().__init__(message, code)


class NotAuthenticatedError(DomainError):
    """Caller identity is missing or could not be verified."""

    default_code = "auth.unauthenticated"


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    default_code = "auth.forbidden"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, code: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource.capitalize()} not found.",
            code or f"{resource}.not_found",
        )


class ConflictError(DomainError):
    """Raised when a write collides with existing state."""

    default_code = "conflict"
