"""
Development environment specific settings.

This module contains settings that are specific to the development environment,
such as debug flags.
"""

from .base import BaseAppSettings


class DevelopmentSettings(BaseAppSettings):
    """
    Settings class for development environment.

    Enables debug mode, which also allows the built-in development
    signing secret when JWT_SECRET_KEY is not set.

    Attributes:
        DEBUG: Always True in development
    """

    DEBUG: bool = True
