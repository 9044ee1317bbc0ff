"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sonic.config import Settings
from sonic.interface.api.errors import problem_response
from sonic.persistence.health import DatabaseHealthCheck

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    environment: str


class DatabaseHealthResponse(BaseModel):
    """Database health check response."""

    status: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.api.version,
        environment=settings.environment,
    )


@router.get(
    "/db-health",
    response_model=DatabaseHealthResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"description": "Store down"}},
)
async def database_health_check(
    request: Request, health_check: FromDishka[DatabaseHealthCheck]
) -> DatabaseHealthResponse | JSONResponse:
    """Readiness check that pings the database."""
    if not await health_check.is_healthy():
        return problem_response(
            request,
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "The data store is unavailable.",
            "store.unavailable",
        )
    return DatabaseHealthResponse(status="healthy")
