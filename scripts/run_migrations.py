#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from chatter.config import Settings
from chatter.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    if not settings.database_url:
        logfire.error("Cannot migrate: DATABASE__URL is not set")
        return 1

    try:
        logfire.info("Applying migrations", target=target)
        command.upgrade(Config("alembic.ini"), target)
        logfire.info("Migrations applied", target=target)
        return 0
    except Exception as e:
        logfire.error(
            "Migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # A half-migrated schema must stop the deploy
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
