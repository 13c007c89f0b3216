"""
Application factory module.

This module assembles the credential service: error handling, security,
middleware, the health check and the auth routes, around one account
directory owned by the application.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from credcore.accounts.directory import BaseUserDirectory, InMemoryUserDirectory
from credcore.api import auth_router
from credcore.config import BaseAppSettings, get_settings
from credcore.errors import setup_errors
from credcore.logging.manager import ensure_logger
from credcore.middleware import setup_middlewares
from credcore.monitoring import setup_health_endpoint
from credcore.security import setup_security


def configure_app(
    app: FastAPI,
    settings: Optional[BaseAppSettings] = None,
    directory: Optional[BaseUserDirectory] = None,
) -> None:
    """
    Configure a FastAPI application as the credential service.

    Args:
        app: The FastAPI application to configure
        settings: Optional application settings, if not provided will be loaded
                 from environment
        directory: Optional account directory; a fresh in-memory one is
                  created if omitted
    """
    app_settings = settings or get_settings()
    logger = ensure_logger(None, __name__, app_settings)

    app.debug = app_settings.DEBUG
    app.state.directory = directory if directory is not None else InMemoryUserDirectory()

    # Configure error handling (required)
    setup_errors(app, app_settings, logger)
    # Configure security (signing settings, hashing work factor)
    setup_security(app, app_settings, logger)
    # Configure middleware (CORS)
    setup_middlewares(app, app_settings, logger)
    # Routes
    setup_health_endpoint(app, app_settings, logger)
    app.include_router(auth_router)


def create_app(
    settings: Optional[BaseAppSettings] = None,
    directory: Optional[BaseUserDirectory] = None,
) -> FastAPI:
    """
    Create a fully configured credential service application.

    Args:
        settings: Optional application settings (loaded from environment if omitted)
        directory: Optional account directory, for isolation in tests

    Returns:
        Configured FastAPI application
    """
    app_settings = settings or get_settings()
    logger = ensure_logger(None, __name__, app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"{app_settings.APP_NAME} {app_settings.VERSION} starting")
        yield
        logger.info(f"{app_settings.APP_NAME} shutting down")

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.VERSION,
        lifespan=lifespan,
    )
    configure_app(app, app_settings, directory)
    return app
