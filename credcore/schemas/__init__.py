"""
Common schemas for the credential service.

This module provides the Pydantic schemas for request and response bodies.
"""

from credcore.schemas.request import LoginRequest, RegisterRequest
from credcore.schemas.response import (
    AccountResponse,
    ErrorResponse,
    HealthResponse,
    TokenResponse,
)

__all__ = [
    "AccountResponse",
    "ErrorResponse",
    "HealthResponse",
    "TokenResponse",
    "LoginRequest",
    "RegisterRequest",
]
