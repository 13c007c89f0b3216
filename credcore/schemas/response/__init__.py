"""
Response schemas for API endpoints.

This module exports all response schemas for easy access.
"""

from credcore.schemas.response.account import AccountResponse
from credcore.schemas.response.error import ErrorResponse
from credcore.schemas.response.health import HealthResponse
from credcore.schemas.response.token import TokenResponse

__all__ = [
    "AccountResponse",
    "ErrorResponse",
    "HealthResponse",
    "TokenResponse",
]
