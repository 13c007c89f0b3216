"""
Base configuration module for the credential service.

This module provides the base settings class that the environment-specific
settings classes inherit from. It covers the application identity, the HTTP
listener, logging, token signing and password hashing.
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

# Used only when no JWT_SECRET_KEY is supplied and DEBUG is on.
DEV_JWT_SECRET_KEY = "credcore-development-secret-change-me"


class BaseAppSettings(BaseSettings):
    """
    Base settings class for application configuration.

    Attributes:
        APP_NAME: The name of the application
        DEBUG: Flag to enable/disable debug mode
        VERSION: Application version string
        HOST: Interface the HTTP server binds to
        PORT: Port the HTTP server listens on
        LOG_LEVEL: Default logging level
        LOG_JSON_FORMAT: Emit log records as JSON
        JWT_SECRET_KEY: Secret key for token signing
        JWT_ALGORITHM: Algorithm used for token signing
        JWT_ACCESS_TOKEN_EXPIRE_MINUTES: Lifetime of issued tokens in minutes
        JWT_AUDIENCE: Audience claim for issued tokens
        JWT_ISSUER: Issuer claim for issued tokens
        PASSWORD_HASH_ROUNDS: bcrypt work factor
        MIDDLEWARE_CORS_OPTIONS: CORS middleware options (passed to CORSMiddleware)
        HEALTH_PATH: Health check endpoint path
    """

    APP_NAME: str = Field(default="credcore")
    DEBUG: bool = Field(default=False)
    VERSION: str = Field(default="0.1.0")

    # Server configuration
    HOST: str = Field(default="0.0.0.0", description="Interface to bind to")
    PORT: int = Field(default=4000, description="Port to listen on")

    # Logging configuration
    LOG_LEVEL: str = Field(default="INFO", description="Default logging level")
    LOG_JSON_FORMAT: bool = Field(
        default=False, description="Emit log records as JSON"
    )

    # Security configuration
    JWT_SECRET_KEY: str = Field(
        default="",  # Empty default to encourage explicit setting
        description="Secret key for signing tokens",
    )
    JWT_ALGORITHM: str = Field(
        default="HS256", description="Algorithm used for token signing"
    )
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=15, description="Lifetime of issued tokens in minutes"
    )
    JWT_AUDIENCE: Optional[str] = Field(
        default=None, description="Audience claim for issued tokens"
    )
    JWT_ISSUER: Optional[str] = Field(
        default=None, description="Issuer claim for issued tokens"
    )
    PASSWORD_HASH_ROUNDS: int = Field(
        default=12, description="bcrypt work factor (log2 of the iteration count)"
    )

    # Middleware configuration
    MIDDLEWARE_CORS_OPTIONS: dict = Field(
        default_factory=lambda: {
            "allow_origins": ["*"],
            "allow_credentials": False,
            "allow_methods": ["*"],
            "allow_headers": ["*"],
        },
        description="CORS middleware options (passed to CORSMiddleware)",
    )

    # Monitoring configuration
    HEALTH_PATH: str = Field(
        default="/health", description="Health check endpoint path"
    )

    @field_validator("JWT_AUDIENCE", "JWT_ISSUER", mode="before")
    def set_default_aud_iss(cls, value, info):
        """Set default audience and issuer based on app name if not provided."""
        if value is None:
            app_name = info.data.get("APP_NAME", "credcore")
            return app_name.lower()
        return value

    @field_validator("JWT_SECRET_KEY", mode="before")
    def fallback_jwt_secret_if_empty(cls, value, info):
        """
        Fall back to the development secret if none is provided.

        The fallback is only accepted in debug mode. Without DEBUG the
        settings refuse to load, so a production process cannot start
        with a well-known signing key.
        """
        if not value:
            if info.data.get("DEBUG", False):
                return DEV_JWT_SECRET_KEY
            raise ValueError(
                "JWT_SECRET_KEY must be explicitly set in production. "
                "Generate a secure key with: python -c 'import secrets; print(secrets.token_hex(32))'"
            )
        return value

    @field_validator("PASSWORD_HASH_ROUNDS")
    def validate_hash_rounds(cls, value):
        """bcrypt accepts work factors between 4 and 31."""
        if not 4 <= value <= 31:
            raise ValueError(
                f"PASSWORD_HASH_ROUNDS must be between 4 and 31, got {value}"
            )
        return value

    @field_validator("LOG_LEVEL")
    def normalize_log_level(cls, value):
        return value.upper()

    @property
    def uses_dev_secret(self) -> bool:
        """True when tokens are signed with the built-in development secret."""
        return self.JWT_SECRET_KEY == DEV_JWT_SECRET_KEY

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")
