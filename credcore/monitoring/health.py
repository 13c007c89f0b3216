"""
Health check endpoint.

A liveness probe only: the service has no external dependencies to check.
"""

from typing import Optional

from fastapi import APIRouter, FastAPI

from credcore.config.base import BaseAppSettings
from credcore.logging import Logger, ensure_logger
from credcore.schemas.response import HealthResponse


def setup_health_endpoint(
    app: FastAPI,
    settings: BaseAppSettings,
    logger: Optional[Logger] = None,
) -> None:
    """
    Register the health check route on the application.

    Args:
        app: FastAPI application instance
        settings: Application settings (HEALTH_PATH)
        logger: Optional logger
    """
    log = ensure_logger(logger, __name__, settings)
    router = APIRouter(tags=["health"])

    @router.get(settings.HEALTH_PATH, response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(ok=True)

    app.include_router(router)
    log.info(f"Health endpoint registered at {settings.HEALTH_PATH}")
