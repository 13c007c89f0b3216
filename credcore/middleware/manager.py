"""
Middleware manager.

The service installs one middleware: Starlette's CORS handler, configured
from ``MIDDLEWARE_CORS_OPTIONS`` (allow-all by default).
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from credcore.config.base import BaseAppSettings
from credcore.logging import Logger, ensure_logger


def setup_middlewares(
    app: FastAPI,
    settings: BaseAppSettings,
    logger: Optional[Logger] = None,
) -> None:
    """
    Install all configured middleware on the application.

    Args:
        app: FastAPI application instance
        settings: Application settings
        logger: Optional logger
    """
    log = ensure_logger(logger, __name__, settings)
    app.add_middleware(CORSMiddleware, **settings.MIDDLEWARE_CORS_OPTIONS)
    log.info(
        "CORS enabled for origins %s",
        settings.MIDDLEWARE_CORS_OPTIONS.get("allow_origins", []),
    )
