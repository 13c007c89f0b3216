"""
Auth API routes: register, login, current account.

Handlers are plain (sync) functions; FastAPI runs them on its thread pool,
so bcrypt work never blocks the event loop.
"""

from fastapi import APIRouter, Depends, status

from credcore.accounts.directory import BaseUserDirectory
from credcore.accounts.models import Account
from credcore.config.base import BaseAppSettings
from credcore.errors.exceptions import InvalidCredentialsError
from credcore.logging.manager import ensure_logger
from credcore.schemas import (
    AccountResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from credcore.security.dependencies import (
    get_current_account,
    get_directory,
    get_settings_dependency,
)
from credcore.security.tokens.service import issue_token

logger = ensure_logger(None, __name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/auth/register",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(
    req: RegisterRequest,
    directory: BaseUserDirectory = Depends(get_directory),
) -> AccountResponse:
    """Register a new account."""
    account = directory.register(req.email, req.password, req.role)
    return AccountResponse(**account)


@router.post(
    "/auth/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(
    req: LoginRequest,
    directory: BaseUserDirectory = Depends(get_directory),
    settings: BaseAppSettings = Depends(get_settings_dependency),
) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    account = directory.authenticate(req.email, req.password)
    if account is None:
        logger.info("Login rejected")
        raise InvalidCredentialsError()
    return TokenResponse(token=issue_token(account, settings))


@router.get(
    "/me",
    response_model=AccountResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def me(account: Account = Depends(get_current_account)) -> AccountResponse:
    """Return the account the presented token belongs to."""
    return AccountResponse(**account.to_public())
