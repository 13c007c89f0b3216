"""
Security module manager.

This module provides a setup function for initializing the security module
and integrating it with a FastAPI application.
"""

from typing import Optional

from fastapi import FastAPI

from credcore.config.base import BaseAppSettings
from credcore.logging import Logger, ensure_logger
from credcore.security.password import configure_password_hashing


def setup_security(
    app: FastAPI,
    settings: BaseAppSettings,
    logger: Optional[Logger] = None,
) -> None:
    """
    Configure security features for a FastAPI application.

    Applies the password hashing work factor and publishes the settings
    the authorization gate verifies tokens with.

    Args:
        app: The FastAPI application to configure
        settings: Application settings
        logger: Optional logger instance
    """
    log = ensure_logger(logger, __name__, settings)

    configure_password_hashing(settings.PASSWORD_HASH_ROUNDS)
    app.state.settings = settings

    log.info(f"Token lifetime: {settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES} minutes")
    log.info(f"Token algorithm: {settings.JWT_ALGORITHM}")
    log.info(f"Password hashing: bcrypt_sha256, {settings.PASSWORD_HASH_ROUNDS} rounds")
    if settings.uses_dev_secret:
        log.warning(
            "WARNING: Using the built-in development JWT_SECRET_KEY. "
            "This is acceptable for development but not for production."
        )
