"""
Exception handlers for the credential service.

This module provides exception handlers that convert application exceptions
into the service's JSON error body, ``{"error": "<message>"}``.
"""

from functools import partial
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from credcore.errors.exceptions import AppError, BadRequestError, InternalError
from credcore.logging import Logger, ensure_logger
from credcore.schemas import ErrorResponse


def create_error_response(
    status_code: int,
    message: str,
    headers: Optional[dict] = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        status_code: HTTP status code
        message: Client-facing error message
        headers: Optional extra response headers

    Returns:
        JSON response carrying an ErrorResponse body
    """
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(ErrorResponse(error=message)),
        headers=headers,
    )


async def app_error_handler(
    request: Request, exc: AppError, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Handler for AppError and its subclasses.

    Args:
        request: FastAPI request
        exc: AppError instance
        logger: Optional logger for server-side detail

    Returns:
        JSON response with the error message
    """
    log = ensure_logger(logger, __name__)
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        log.error(
            f"{exc.code} on {request.method} {request.url.path}: {exc.details}"
        )
    else:
        log.info(
            f"{exc.code} ({exc.status_code}) on {request.method} {request.url.path}"
        )

    return create_error_response(exc.status_code, exc.message, headers=headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Handler for FastAPI's RequestValidationError.

    Bodies that are not JSON, or whose fields have the wrong type, are
    reported as a plain 400 rather than FastAPI's default 422 detail list.
    """
    log = ensure_logger(logger, __name__)
    log.info(f"Rejected request body on {request.method} {request.url.path}")
    error = BadRequestError()
    return create_error_response(error.status_code, error.message)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handler for routing-level HTTP errors (unknown path, wrong method).
    """
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "not found"
    else:
        message = str(exc.detail)
    return create_error_response(
        exc.status_code, message, headers=getattr(exc, "headers", None)
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception, logger: Optional[Logger] = None
) -> JSONResponse:
    """
    Generic exception handler for unhandled exceptions.

    The traceback is logged server-side; the client receives only the
    generic server error message.
    """
    log = ensure_logger(logger, __name__)
    log.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!r}",
        exc_info=exc,
    )
    error = InternalError()
    return create_error_response(error.status_code, error.message)


def register_exception_handlers(app: FastAPI, logger: Optional[Logger] = None) -> None:
    """
    Register all exception handlers with a FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Optional logger for logging exceptions
    """
    # The AppError handler also covers every subclass
    app.exception_handler(AppError)(partial(app_error_handler, logger=logger))

    # Framework exceptions
    app.exception_handler(RequestValidationError)(
        partial(validation_exception_handler, logger=logger)
    )
    app.exception_handler(StarletteHTTPException)(http_error_handler)

    app.exception_handler(Exception)(
        partial(unhandled_exception_handler, logger=logger)
    )
