#!/usr/bin/env python3
"""Start the Sonic API under uvicorn.

Signing settings are checked before the server starts so a bad
AUTH__JWT_SECRET stops the container instead of failing every login.
"""

import sys

import logfire
import uvicorn

from sonic.config import Settings
from sonic.util.jwt import validate_auth_settings
from sonic.util.logging import setup_logging
from sonic.util.observability import configure_logfire


def main() -> int:
    """Validate configuration, then serve the app until shutdown."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span("sonic.startup", environment=settings.environment):
        try:
            validate_auth_settings(settings.auth)
            logfire.info(
                "Starting Sonic API",
                host=settings.host,
                port=settings.port,
                admin_seed=settings.admin_seed.enabled,
            )
            uvicorn.run(
                "sonic.interface.api.app:app",
                host=settings.host,
                port=settings.port,
                log_config=None,  # keep the Logfire handler installed by setup_logging
                log_level="debug" if settings.debug else "info",
                reload=settings.environment == "development" and settings.debug,
            )
        except Exception as e:
            logfire.error(
                "Sonic API failed to start",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
