"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from api.config import get_settings
from api.middleware import get_cors_headers, setup_middleware
from api.routes import api_router, users_router_no_prefix
from api.services import close_services, get_user_service
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Initialize settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Handle application lifespan events."""
    # Startup
    logger.info(f"{settings.app_name} v{settings.app_version} started")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Database: {settings.database_path}")

    # Open the store and create the users table if needed
    get_user_service(settings)

    yield

    # Shutdown
    close_services()
    logger.info(f"{settings.app_name} shutting down")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Users API - CRUD over a local SQLite store",
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
)

# Setup middleware (must be before exception handlers)
setup_middleware(
    app,
    ui_url=settings.ui_url,
    environment=settings.environment,
    https_redirect=settings.https_redirect,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn errors escaping the routers into a 500 that still carries CORS headers."""
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)

    origin = request.headers.get("origin")
    cors_headers = get_cors_headers(origin, ui_url=settings.ui_url, environment=settings.environment)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
        headers=cors_headers,
    )


# Include routers
app.include_router(api_router)
app.include_router(users_router_no_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.docs_enabled,
        log_level=settings.log_level.lower(),
    )
