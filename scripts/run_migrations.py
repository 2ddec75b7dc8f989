#!/usr/bin/env python3
"""Apply database migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from peerskill.config import Settings
from peerskill.util.logging import setup_logging
from peerskill.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision``."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("migrations.upgrade", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy stops before the app starts on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
