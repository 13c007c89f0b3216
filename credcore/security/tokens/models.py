"""
Token models.

Tokens are not stored; ``Claims`` is the verified view of one.
"""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from credcore.accounts.models import Role


class TokenType(str, enum.Enum):
    """Kinds of token the service issues. Only access tokens exist."""

    ACCESS = "access"


class Claims(BaseModel):
    """
    Facts asserted by a verified token.

    Attributes:
        subject: Identifier of the account the token was issued to
        email: Account email at issuance
        role: Account role at issuance
        issued_at: Issuance time (UTC)
        expires_at: Expiry time (UTC)
    """

    model_config = ConfigDict(frozen=True)

    subject: str = Field(..., min_length=1)
    email: str
    role: Role
    issued_at: datetime
    expires_at: datetime
