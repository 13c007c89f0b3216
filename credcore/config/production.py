"""
Production environment specific settings.

This module contains settings that are specific to the production environment.
"""

from .base import BaseAppSettings


class ProductionSettings(BaseAppSettings):
    """
    Settings class for production environment.

    Disables debug mode, which makes JWT_SECRET_KEY mandatory.
    Inherits basic settings from BaseAppSettings.

    Attributes:
        DEBUG: Always False in production for security
        LOG_JSON_FORMAT: Structured logs for aggregation
    """

    DEBUG: bool = False
    LOG_JSON_FORMAT: bool = True
