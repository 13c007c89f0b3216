"""
Configuration module for credcore.

This module provides:
- BaseAppSettings: The base class for application settings, supporting environment variable loading.
- Environment-specific settings (development, testing, production).
- get_settings: Factory for loading the correct settings class based on APP_ENV.

Example environment variables:

# Application
APP_NAME="credcore"
APP_ENV="development"  # Options: development, testing, production
DEBUG=true

# Server
HOST="0.0.0.0"
PORT=4000

# Logging
LOG_LEVEL="INFO"
LOG_JSON_FORMAT=false

# Security
JWT_SECRET_KEY="your-secret-key-at-least-32-characters-long"
JWT_ALGORITHM="HS256"
JWT_ACCESS_TOKEN_EXPIRE_MINUTES=15
PASSWORD_HASH_ROUNDS=12

# Middleware
MIDDLEWARE_CORS_OPTIONS='{"allow_origins":["http://localhost:3000"],"allow_methods":["*"],"allow_headers":["*"]}'
"""

from .base import DEV_JWT_SECRET_KEY, BaseAppSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "BaseAppSettings",
    "DEV_JWT_SECRET_KEY",
    "get_settings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
]
