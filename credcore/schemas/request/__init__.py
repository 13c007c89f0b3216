"""
Request body schemas for the auth endpoints.

Fields are optional at the schema level: a missing email or password is a
domain validation failure reported with the service's own message, not a
schema error. The role hint accepts any JSON value; anything other than
"cleaner" registers a customer.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Body of ``POST /auth/register``."""

    email: Optional[str] = Field(default=None, description="Account email")
    password: Optional[str] = Field(default=None, description="Plaintext password")
    role: Any = Field(
        default=None, description='Role hint; only "cleaner" is recognized'
    )


class LoginRequest(BaseModel):
    """Body of ``POST /auth/login``."""

    email: Optional[str] = Field(default=None, description="Account email")
    password: Optional[str] = Field(default=None, description="Plaintext password")
