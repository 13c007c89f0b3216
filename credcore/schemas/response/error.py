"""
Error response schema.

Every error the service returns has the same body: a single ``error``
field holding the client-facing message.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Schema for error responses.

    Attributes:
        error: Human-readable error message
    """

    error: str = Field(..., description="Human-readable error message")
