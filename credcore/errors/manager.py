"""
Error management functionality for the credential service.

This module provides the main entry point for configuring error handling
in a FastAPI application, including exception handler registration.
"""

from typing import Optional

from fastapi import FastAPI

from credcore.config.base import BaseAppSettings
from credcore.errors.handlers import register_exception_handlers
from credcore.logging import Logger, ensure_logger


def setup_errors(
    app: FastAPI,
    settings: Optional[BaseAppSettings] = None,
    logger: Optional[Logger] = None,
) -> None:
    """
    Configure error handling for a FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Optional application settings
        logger: Optional logger for logging exceptions
    """
    log = ensure_logger(logger, __name__, settings)
    register_exception_handlers(app, logger=log)
    log.debug("Exception handlers registered")
