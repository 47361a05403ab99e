"""Route initialization module."""

from api.routes.health import router as health_router
from api.routes.user import router as user_router
from fastapi import APIRouter

# Create main API router
api_router = APIRouter(prefix="/api")

# Include sub-routers
api_router.include_router(health_router)

# Users are served at the root (/users), outside the /api prefix
users_router_no_prefix = APIRouter()
users_router_no_prefix.include_router(user_router)


__all__ = ["api_router", "users_router_no_prefix"]
