"""
Accounts module.

Account model, role normalization and the user directory.
"""

from credcore.accounts.models import Account, Role, normalize_email
from credcore.accounts.directory import BaseUserDirectory, InMemoryUserDirectory

__all__ = [
    "Account",
    "Role",
    "normalize_email",
    "BaseUserDirectory",
    "InMemoryUserDirectory",
]
