"""Health check routes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from peerskill.config import Settings
from peerskill.persistence.probe import StoreProbe

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    store: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], probe: FromDishka[StoreProbe]
) -> HealthResponse:
    """Report service status and whether the store answers.

    Answers 200 even when the database is down, with ``status="degraded"``
    and ``store="unreachable"``.
    """
    try:
        await probe.ping()
        store = "ok"
    except (SQLAlchemyError, OSError) as e:
        logfire.warn("Store unreachable", error=str(e))
        store = "unreachable"

    return HealthResponse(
        status="healthy" if store == "ok" else "degraded",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        store=store,
    )
