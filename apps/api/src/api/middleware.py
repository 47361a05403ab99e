"""Middleware setup for the FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

logger = logging.getLogger(__name__)

# Local front-end dev servers allowed in development-like environments
_DEV_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
)
_DEV_ENVIRONMENTS = {"development", "dev", "local"}


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Get list of allowed CORS origins.

    The UI URL is allowed under both http and https schemes.

    Args:
        ui_url: URL of the UI application
        environment: Environment name (development, production, etc.)

    Returns:
        Deduplicated list of allowed origin URLs
    """
    origins: list[str] = []

    if ui_url:
        base = ui_url.rstrip("/")
        origins.append(base)
        for scheme, other in (("http://", "https://"), ("https://", "http://")):
            if base.startswith(scheme):
                origins.append(other + base[len(scheme) :])

    if environment.lower() in _DEV_ENVIRONMENTS:
        origins.extend(_DEV_ORIGINS)

    return list(dict.fromkeys(origins))


def get_cors_headers(origin: str | None, ui_url: str | None = None, environment: str = "development") -> dict[str, str]:
    """Get CORS headers for responses built outside the CORS middleware.

    Args:
        origin: The origin from the request header
        ui_url: URL of the UI application
        environment: Environment name

    Returns:
        Dictionary of CORS headers, empty if origin is missing or not allowed
    """
    if not origin or origin not in get_allowed_origins(ui_url, environment):
        return {}

    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "*",
        "Access-Control-Allow-Headers": "*",
    }


def setup_middleware(
    app: FastAPI,
    ui_url: str | None = None,
    environment: str = "development",
    https_redirect: bool = False,
) -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        ui_url: URL of the UI application for CORS
        environment: Environment name (development, production, etc.)
        https_redirect: Redirect plain HTTP requests to HTTPS
    """
    allowed_origins = get_allowed_origins(ui_url, environment)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, environment)

    if https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)
        logger.info("HTTPS redirection enabled")
