"""Logfire setup for the Sonic API.

Usage:
    import logfire

    logfire.info("Post created", post_id=str(post.id), author_id=str(author_id))

    with logfire.span("like_service.toggle", post_id=str(post_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from sonic.config import Settings

SERVICE_NAME = "sonic-backend"

# Attribute names that must never leave the process; logfire already
# scrubs "password" and "auth" style keys
SCRUB_PATTERNS = ["password_hash", "access_token", "jwt_secret"]


def should_send_to_logfire(settings: Settings) -> bool:
    """Whether telemetry goes to Logfire cloud.

    An explicit ``send_to_logfire`` wins; otherwise a configured token
    enables sending.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.api.version,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Tag request spans with method, path and client host."""
    result = {**attributes}
    result["method"] = getattr(request, "method", None)
    result["path"] = request.url.path
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request of the app.

    Request bodies are not captured: they carry passwords on the auth routes.
    """
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run on the engine."""
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
