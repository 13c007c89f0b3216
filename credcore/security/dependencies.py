"""
Security dependencies for FastAPI.

This module is the authorization gate: it extracts the bearer credential
from the request, verifies it, and hands the verified claims to the route
as an ordinary dependency value. Nothing is written onto the request.

A request ends in one of three states:
- rejected with ``MissingTokenError`` (no header, or not ``Bearer <token>``)
- rejected with ``InvalidTokenError`` (verification failed)
- authenticated, with ``Claims`` passed downstream
"""

from typing import Optional

from fastapi import Depends, Header, Request

from credcore.accounts.models import Account
from credcore.config.base import BaseAppSettings
from credcore.errors.exceptions import MissingTokenError, UserNotFoundError
from credcore.security.tokens.models import Claims
from credcore.security.tokens.service import verify_token

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    The scheme must be the literal ``Bearer`` followed by a single space.

    Raises:
        MissingTokenError: If the header is absent or malformed
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise MissingTokenError()
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token or " " in token:
        raise MissingTokenError()
    return token


def authorize(authorization: Optional[str], settings: BaseAppSettings) -> Claims:
    """
    Run the gate over a raw header value.

    Raises:
        MissingTokenError: If no bearer credential is presented
        InvalidTokenError: If the credential fails verification
    """
    token = extract_bearer_token(authorization)
    return verify_token(token, settings)


def get_settings_dependency(request: Request) -> BaseAppSettings:
    """Settings the application was configured with."""
    return request.app.state.settings


def get_directory(request: Request):
    """The account directory owned by the application."""
    return request.app.state.directory


def get_token_claims(
    authorization: Optional[str] = Header(default=None),
    settings: BaseAppSettings = Depends(get_settings_dependency),
) -> Claims:
    """
    FastAPI dependency guarding protected routes.

    Returns:
        The verified claims of the presented token
    """
    return authorize(authorization, settings)


def get_current_account(
    claims: Claims = Depends(get_token_claims),
    directory=Depends(get_directory),
) -> Account:
    """
    Resolve the token's subject to the account as it is now.

    Raises:
        UserNotFoundError: If the account no longer exists
    """
    account = directory.find_by_id(claims.subject)
    if account is None:
        raise UserNotFoundError(user_id=claims.subject)
    return account
