"""
Base exception classes for the credential service.

This module provides a standardized exception hierarchy used throughout
the application. Every exception carries the HTTP status code and the
client-facing message it is rendered with.

Authentication failures are deliberately coarse: a wrong password and an
unknown email share one message, and every token problem (bad signature,
malformed, expired) shares another.
"""

from http import HTTPStatus
from typing import Any, Dict, List, Optional, Union


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message returned to the client
        code: Error code identifier (default: ERROR)
        status_code: HTTP status code (default: 500)
        details: Additional error details, logged but never returned
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: str = "ERROR",
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """
    Exception raised when client input is missing or malformed.

    Attributes:
        fields: List of field-specific validation errors
    """

    def __init__(
        self,
        message: str = "email and password are required",
        fields: Optional[List[Dict[str, Any]]] = None,
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.fields = fields or []
        if fields:
            details = details or {}
            details["fields"] = fields

        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.BAD_REQUEST,
            details=details,
        )


class BadRequestError(AppError):
    """Exception raised when the request body cannot be parsed."""

    def __init__(
        self,
        message: str = "invalid request body",
        code: str = "BAD_REQUEST",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.BAD_REQUEST,
            details=details,
        )


class NotFoundError(AppError):
    """Exception raised when a requested resource is not found."""

    def __init__(
        self,
        message: str = "not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Union[str, int]] = None,
        code: str = "NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        if resource_type and resource_id:
            details = details or {}
            details.update({"resource_type": resource_type, "resource_id": resource_id})

        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.NOT_FOUND,
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """Raised when a token's subject no longer exists in the directory."""

    def __init__(
        self,
        user_id: Optional[str] = None,
        message: str = "user not found",
        code: str = "USER_NOT_FOUND",
    ):
        super().__init__(
            message=message, resource_type="User", resource_id=user_id, code=code
        )


class UnauthorizedError(AppError):
    """Exception raised when authentication fails or is missing."""

    def __init__(
        self,
        message: str = "authentication required",
        code: str = "UNAUTHORIZED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.UNAUTHORIZED,
            details=details,
        )


class ConflictError(AppError):
    """Exception raised for resource conflicts (e.g., duplicate entries)."""

    def __init__(
        self,
        message: str = "resource conflict",
        code: str = "CONFLICT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message, code=code, status_code=HTTPStatus.CONFLICT, details=details
        )


class DuplicateEmailError(ConflictError):
    """Raised when an email is already registered (case-insensitively)."""

    def __init__(
        self,
        message: str = "email already registered",
        code: str = "DUPLICATE_EMAIL",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class InternalError(AppError):
    """
    Exception raised for unexpected faults (hashing, signing).

    The client only ever sees the generic message; the cause goes in
    ``details`` and the server log.
    """

    def __init__(
        self,
        message: str = "server error",
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details=details,
        )


# Exception classes for security-related errors
class InvalidCredentialsError(UnauthorizedError):
    """Exception raised when login credentials are invalid."""

    def __init__(
        self,
        message: str = "invalid email or password",
        code: str = "INVALID_CREDENTIALS",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class MissingTokenError(UnauthorizedError):
    """Exception raised when no well-formed bearer credential is presented."""

    def __init__(
        self,
        message: str = "missing token",
        code: str = "MISSING_TOKEN",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class InvalidTokenError(UnauthorizedError):
    """Exception raised when a token is malformed, tampered with or expired."""

    def __init__(
        self,
        message: str = "invalid or expired token",
        code: str = "INVALID_TOKEN",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)
