"""Health check endpoint for service monitoring."""

from fastapi import APIRouter
from pydantic import BaseModel

from finance_tracker import __version__
from finance_tracker.core.config import settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    storage_backend: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        storage_backend=settings.storage_backend,
    )
