#!/usr/bin/env python3
"""Serve the Chatter API with uvicorn.

Logging and Logfire are configured before the app module is imported so that
errors raised while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from chatter.config import Settings
from chatter.util.logging import setup_logging
from chatter.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    if not settings.database_url:
        logfire.warn("DATABASE__URL is not set; data routes will answer 503")

    try:
        logfire.info(
            "Starting Chatter API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "chatter.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Chatter API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
