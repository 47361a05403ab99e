"""Health check routes."""

from api.config import Settings, get_settings
from api.models.health import HealthCheckResponse
from api.services import get_user_service
from common.services.user_service import UserService
from fastapi import APIRouter, Depends

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
def health_check(
    settings: Settings = Depends(get_settings),
    service: UserService = Depends(get_user_service),
) -> HealthCheckResponse:
    """Health check endpoint.

    Returns:
        HealthCheckResponse with status, version and database reachability
    """
    database_ok = service.ping()

    return HealthCheckResponse(
        status="ok" if database_ok else "degraded",
        version=settings.app_version,
        environment=settings.environment,
        database_ok=database_ok,
        message="API is healthy" if database_ok else "Database is unreachable",
    )
