#!/usr/bin/env python3
"""Apply Threads database migrations with Logfire error tracking."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from threads.config import Settings
from threads.util.logging import setup_logging
from threads.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision`` and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", revision=revision)

        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations completed successfully", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container doesn't start with a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
