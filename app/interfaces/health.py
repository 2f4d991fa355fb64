"""
Root and health check routers.

Provides a welcome endpoint and a health endpoint for liveness
and readiness checks. No business logic. Returns application status and version.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.catalog.schemas import HealthResponse, WelcomeResponse
from app.shared.errors.handlers import utc_timestamp

root_router = APIRouter(tags=["health"])
router = APIRouter(tags=["health"])


@root_router.get("/", response_model=WelcomeResponse, summary="Welcome")
def welcome() -> WelcomeResponse:
    return WelcomeResponse(message="Hello World!", timestamp=utc_timestamp())


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)
