"""Liveness route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from chatter.config import Settings
from chatter.domain.value import utcnow

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    service: str
    environment: str
    git_sha: str
    database_configured: bool
    checked_at: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up.

    Never opens a session, so it answers even when ``DATABASE__URL`` is unset;
    ``database_configured`` tells the two cases apart.
    """
    return HealthResponse(
        status="ok",
        service="chatter-api",
        environment=settings.environment,
        git_sha=settings.git_sha,
        database_configured=settings.database_url is not None,
        checked_at=utcnow(),
    )
