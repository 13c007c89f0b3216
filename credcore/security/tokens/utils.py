"""
JWT encoding and decoding with PyJWT.

Decoding checks the signature, expiry, issuer and audience, and requires
every claim the service issues.
"""

from typing import Any, Dict

import jwt  # type: ignore

from credcore.config.base import BaseAppSettings

REQUIRED_CLAIMS = ["sub", "email", "role", "iat", "exp", "iss", "aud"]


def encode_jwt(payload: Dict[str, Any], settings: BaseAppSettings) -> str:
    return jwt.encode(
        payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM
    )


def decode_jwt(token: str, settings: BaseAppSettings) -> Dict[str, Any]:
    """
    Decode and validate a JWT (signature, expiry, issuer, audience).

    Raises:
        jwt.PyJWTError: On any validation failure
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
        options={"require": REQUIRED_CLAIMS},
    )
