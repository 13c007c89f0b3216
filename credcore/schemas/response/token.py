"""
Token response schema for the login endpoint.
"""

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """
    Response model for a successful login.

    Attributes:
        token: Signed bearer token, valid for the configured lifetime
    """

    token: str = Field(..., description="Signed bearer token")
