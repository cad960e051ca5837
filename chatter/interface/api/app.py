"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chatter.config import Settings
from chatter.interface.api.routes import activity, health, threads, users
from chatter.persistence.error import DatabaseNotConfiguredError
from chatter.util.di.container import create_container, setup_di
from chatter.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app_instance: FastAPI) -> AsyncIterator[None]:
    """Close the DI container on shutdown, disconnecting the database."""
    yield
    await app_instance.state.dishka_container.close()


async def database_not_configured_handler(
    request: Request, exc: DatabaseNotConfiguredError
) -> JSONResponse:
    """Answer 503 when a request needs the database but none is configured.

    Sessions are resolved by the container before the route body runs, so
    this cannot be handled inside the routes.
    """
    logfire.error("Database not configured", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Chatter API",
        description="Backend API for Chatter - threads, replies and user profiles",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "Cache-Control"],
        # The renderer reads revalidated paths from this header
        expose_headers=[settings.api.revalidate_header],
        max_age=600,
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(activity.router)

    app_instance.add_exception_handler(
        DatabaseNotConfiguredError, database_not_configured_handler
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
