"""
Error handling module for the credential service.

This module provides the exception hierarchy, the JSON error body and the
exception handlers that connect them.
"""

from credcore.errors.exceptions import (
    AppError,
    BadRequestError,
    ConflictError,
    DuplicateEmailError,
    InternalError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    NotFoundError,
    UnauthorizedError,
    UserNotFoundError,
    ValidationError,
)
from credcore.errors.handlers import register_exception_handlers
from credcore.errors.manager import setup_errors

__all__ = [
    "setup_errors",
    "register_exception_handlers",
    "AppError",
    "ValidationError",
    "BadRequestError",
    "NotFoundError",
    "UserNotFoundError",
    "UnauthorizedError",
    "ConflictError",
    "DuplicateEmailError",
    "InternalError",
    "InvalidCredentialsError",
    "MissingTokenError",
    "InvalidTokenError",
]
