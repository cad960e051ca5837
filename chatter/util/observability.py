"""Logfire setup for the API, the migration runner and the database engine.

Domain and application code log through ``logfire`` directly:

    logfire.info("Reply added", reply_id=str(reply.id))

    with logfire.span("thread_service.get_activity", user_id=str(user_id)):
        ...

Calls made before ``configure_logfire`` runs (as in tests) are accepted and
printed to the console with default options.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from chatter.config import ObservabilitySettings, Settings

# Health probes would otherwise dominate the trace list
UNTRACED_URLS = "/health"


def _should_send(observability: ObservabilitySettings) -> bool:
    # An explicit flag wins; otherwise a token means "send"
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return observability.logfire_token is not None


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = _should_send(observability)

    logfire.configure(
        service_name="chatter-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
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
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes.

    Request headers are captured so revalidation headers show up in traces.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app, capture_headers=True, excluded_urls=UNTRACED_URLS
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the statements run by ``engine``.

    Args:
        engine: The process-wide async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)
