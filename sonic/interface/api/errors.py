"""Mapping of exceptions to RFC 7807 problem responses.

Handlers are registered once on the application; routes and use cases just
raise. Every response body has the shape
``{title, status, detail, instance, code}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from sonic.config import Settings
from sonic.domain.error import (
    ConflictError,
    ContentDeletedException,
    DomainError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

PROBLEM_MEDIA_TYPE = "application/problem+json"

UNEXPECTED_ERROR_DETAIL = (
    "An unexpected error occurred while processing your request."
)

# Most specific first; the first isinstance match wins.
DOMAIN_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ContentDeletedException, status.HTTP_400_BAD_REQUEST),
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def problem_response(
    request: Request, status_code: int, detail: str, code: str
) -> JSONResponse:
    """Build a problem-details response and log it."""
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            status=status_code,
            code=code,
            detail=detail,
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status=status_code,
            code=code,
            detail=detail,
        )

    return JSONResponse(
        status_code=status_code,
        media_type=PROBLEM_MEDIA_TYPE,
        content={
            "title": "Internal server error" if status_code >= 500 else "Error",
            "status": status_code,
            "detail": detail,
            "instance": request.url.path,
            "code": code,
        },
    )


def domain_status(error: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in DOMAIN_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def first_validation_message(errors: list[dict]) -> str:
    """Readable message for the first pydantic/FastAPI validation error."""
    if not errors:
        return "The request is invalid."

    first = errors[0]
    ctx_error = first.get("ctx", {}).get("error")
    message = str(ctx_error) if ctx_error else first.get("msg", "Invalid value")
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    return f"{'.'.join(location)}: {message}" if location else message


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the exception handlers on the application.

    Args:
        app: FastAPI application
        settings: Application settings (``debug`` exposes exception types)
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        return problem_response(
            request, domain_status(exc), exc.message, exc.code or "error"
        )

    @app.exception_handler(IntegrityError)
    async def handle_integrity_error(
        request: Request, exc: IntegrityError
    ) -> JSONResponse:
        return problem_response(
            request,
            status.HTTP_409_CONFLICT,
            "A record with the same unique value already exists.",
            "store.duplicate_key",
        )

    async def handle_store_unavailable(
        request: Request, exc: Exception
    ) -> JSONResponse:
        return problem_response(
            request,
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "The data store is unavailable.",
            "store.unavailable",
        )

    for error_type in (OperationalError, InterfaceError, OSError):
        app.add_exception_handler(error_type, handle_store_unavailable)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return problem_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            first_validation_message(list(exc.errors())),
            "request.invalid",
        )

    @app.exception_handler(PydanticValidationError)
    async def handle_model_validation(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        return problem_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            first_validation_message(list(exc.errors())),
            "request.invalid",
        )

    @app.exception_handler(ValueError)
    async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
        return problem_response(
            request, status.HTTP_400_BAD_REQUEST, str(exc), "request.invalid"
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return problem_response(
            request, exc.status_code, str(exc.detail), f"http.{exc.status_code}"
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logfire.exception(
            "Unhandled exception", path=request.url.path, error=str(exc)
        )
        detail = UNEXPECTED_ERROR_DETAIL
        if settings.debug:
            detail = f"{detail} ({type(exc).__name__})"
        return problem_response(
            request, status.HTTP_500_INTERNAL_SERVER_ERROR, detail, "server.error"
        )
