"""
Account models.

Accounts live only in process memory. The model is frozen, so an account's
identifier and email cannot change after registration, and the password
hash is excluded from serialization and from the repr.
"""

import enum
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Role(str, enum.Enum):
    """
    Closed set of account roles.

    Only ``cleaner`` is recognized on input; anything else is a customer.
    """

    CUSTOMER = "customer"
    CLEANER = "cleaner"

    @classmethod
    def normalize(cls, hint: Optional[Any]) -> "Role":
        """Map a client-supplied role hint onto the closed set."""
        if hint == cls.CLEANER.value:
            return cls.CLEANER
        return cls.CUSTOMER


def normalize_email(email: str) -> str:
    """Key used for the case-insensitive uniqueness check."""
    return email.strip().lower()


def new_account_id() -> str:
    return str(uuid.uuid4())


class Account(BaseModel):
    """
    A registered account.

    Attributes:
        id: Opaque identifier assigned at creation
        email: Email exactly as provided at registration
        password_hash: bcrypt digest of the password
        role: Account role tag
        created_at: Registration time (UTC)
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_account_id)
    email: str
    password_hash: str = Field(exclude=True, repr=False)
    role: Role = Role.CUSTOMER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_public(self) -> Dict[str, Any]:
        """Return the non-secret projection ``{id, email, role}``."""
        return {"id": self.id, "email": self.email, "role": self.role.value}
