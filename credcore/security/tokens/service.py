"""
Token issuance and verification.

Tokens are self-contained signed JWTs; the server keeps no session table.
Every verification failure is reported as the same ``InvalidTokenError``
so callers cannot tell a bad signature from an expired token.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt  # type: ignore
from pydantic import ValidationError as PydanticValidationError

from credcore.accounts.models import Account
from credcore.config import BaseAppSettings, get_settings
from credcore.errors.exceptions import InternalError, InvalidTokenError
from credcore.logging.manager import ensure_logger
from credcore.security.tokens.models import Claims, TokenType
from credcore.security.tokens.utils import decode_jwt, encode_jwt

logger = ensure_logger(None, __name__)


def build_payload(
    account: Account,
    settings: BaseAppSettings,
    issued_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    now = issued_at or datetime.now(timezone.utc)
    expire = now + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    return {
        "sub": account.id,
        "email": account.email,
        "role": account.role.value,
        "type": TokenType.ACCESS.value,
        "iat": now,
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
    }


def issue_token(
    account: Account,
    settings: Optional[BaseAppSettings] = None,
    issued_at: Optional[datetime] = None,
) -> str:
    """
    Issue a signed access token for an account.

    Args:
        account: The authenticated account
        settings: Settings holding the signing secret (loaded if omitted)
        issued_at: Issuance time, defaults to now

    Returns:
        The encoded token

    Raises:
        InternalError: If signing fails
    """
    settings = settings or get_settings()
    payload = build_payload(account, settings, issued_at)
    try:
        token = encode_jwt(payload, settings)
    except Exception as e:
        logger.exception("Token signing failed")
        raise InternalError(details={"error": str(e)}) from e
    logger.info(f"Issued access token for account {account.id}")
    return token


def verify_token(token: str, settings: Optional[BaseAppSettings] = None) -> Claims:
    """
    Verify a token's signature and expiry and return its claims.

    Args:
        token: The encoded token
        settings: Settings holding the signing secret (loaded if omitted)

    Returns:
        The verified claims

    Raises:
        InvalidTokenError: On any failure
    """
    settings = settings or get_settings()
    try:
        payload = decode_jwt(token, settings)
        if payload.get("type", TokenType.ACCESS.value) != TokenType.ACCESS.value:
            raise InvalidTokenError(details={"error": "unexpected token type"})
        return Claims(
            subject=payload["sub"],
            email=payload["email"],
            role=payload["role"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except InvalidTokenError as e:
        logger.warning(f"Token rejected: {e.details.get('error')}")
        raise
    except jwt.ExpiredSignatureError:
        logger.warning("Expired token used")
        raise InvalidTokenError(details={"error": "expired"})
    except (jwt.PyJWTError, PydanticValidationError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Token validation error: {type(e).__name__}")
        raise InvalidTokenError(details={"error": str(e)})
