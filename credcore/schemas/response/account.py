"""
Account response schema.

This is the only outward shape of an account; the password hash has no
field here.
"""

from pydantic import BaseModel, ConfigDict, Field

from credcore.accounts.models import Role


class AccountResponse(BaseModel):
    """
    Non-secret projection of an account.

    Attributes:
        id: Opaque account identifier
        email: Email as provided at registration
        role: Account role tag
    """

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Opaque account identifier")
    email: str = Field(..., description="Email as provided at registration")
    role: Role = Field(..., description="Account role tag")
