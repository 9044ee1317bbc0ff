"""Standard-library logging bridged into Logfire.

uvicorn, alembic and SQLAlchemy log through ``logging``; the Logfire handler
puts those records next to the application's own spans.
"""

import logging

import logfire

from sonic.config import Settings

# Loggers that are chatty at INFO and only interesting when something breaks
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncpg")


def log_level(settings: Settings) -> int:
    """Root log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to Logfire.

    Call after ``configure_logfire``.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logfire.debug(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
