"""
Health check router.

Provides a simple health endpoint for liveness and readiness checks.
No business logic. Returns application status, version and whether
the store answers.
"""

from fastapi import APIRouter, Depends

from backlog.core.config import Settings
from backlog.infrastructure.catalog.database import Database
from backlog.interfaces.catalog.dependencies import get_database, get_settings
from backlog.interfaces.catalog.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and store reachability.",
)
def health_check(
    settings: Settings = Depends(get_settings),
    db: Database = Depends(get_database),
) -> HealthResponse:
    """Return current application health status."""
    reachable = db.ping()
    return HealthResponse(
        status="ok" if reachable else "degraded",
        version=settings.version,
        database="up" if reachable else "down",
    )
