"""Standard library logging for the process.

Library loggers (uvicorn, SQLAlchemy, Alembic) use ``logging``; their records
are forwarded to Logfire so they land next to the application's own spans.
"""

import logging

import logfire

from chatter.config import Settings

# Loggers kept at WARNING unless debugging
NOISY_LOGGERS = ("sqlalchemy.pool", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Route standard library logging through Logfire.

    Args:
        settings: Application settings; ``debug`` lowers every level to DEBUG
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by uvicorn or pytest
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if settings.debug else logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
