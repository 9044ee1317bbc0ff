#!/usr/bin/env python3
"""Apply Alembic migrations to the Sonic database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0e9a7b21
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from sonic.config import Settings
from sonic.util.logging import setup_logging
from sonic.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision (head by default)."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    revision = argv[0] if argv else "head"

    with logfire.span("sonic.migrations", revision=revision):
        try:
            # migrations/env.py takes the URL from DATABASE__URL
            alembic_cfg = Config(ALEMBIC_INI)
            alembic_cfg.attributes["configure_logger"] = False
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve a half-migrated schema
            raise

    logfire.info("Database migrated", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
