"""
User directory.

This module defines the directory interface the HTTP layer depends on and
the in-memory implementation the service ships with. The directory owns
the account collection; nothing outside it sees a password hash.

Limitations:
- Volatile storage only: accounts are lost when the process exits
- No profile updates or account removal
"""

import abc
import threading
from typing import Any, Dict, Iterator, Optional

from credcore.accounts.models import Account, Role, normalize_email
from credcore.errors.exceptions import (
    DuplicateEmailError,
    InternalError,
    ValidationError,
)
from credcore.logging.manager import ensure_logger
from credcore.security.password import get_password_hash, verify_password

logger = ensure_logger(None, __name__)


class BaseUserDirectory(abc.ABC):
    """
    Abstract base class for account directories.

    Implementations must make ``register`` atomic with respect to the
    uniqueness check: two concurrent registrations of the same email
    produce exactly one account.
    """

    @abc.abstractmethod
    def register(
        self, email: Optional[str], password: Optional[str], role_hint: Any = None
    ) -> Dict[str, Any]:
        """
        Create an account and return its non-secret projection.

        Args:
            email: Email as provided by the client
            password: Plaintext password
            role_hint: Client-supplied role; only "cleaner" is recognized

        Returns:
            ``{"id", "email", "role"}`` for the new account

        Raises:
            ValidationError: If email or password is empty
            DuplicateEmailError: If the email is already registered
            InternalError: If hashing fails
        """

    @abc.abstractmethod
    def find_by_email(self, email: str) -> Optional[Account]:
        """Case-insensitive lookup by email."""

    @abc.abstractmethod
    def find_by_id(self, account_id: str) -> Optional[Account]:
        """Exact lookup by identifier."""

    def authenticate(
        self, email: Optional[str], password: Optional[str]
    ) -> Optional[Account]:
        """
        Return the account when email and password match, None otherwise.

        An unknown email and a wrong password are indistinguishable to the
        caller.
        """
        if not email or not password:
            return None
        account = self.find_by_email(email)
        if account is None:
            return None
        if not verify_password(password, account.password_hash):
            return None
        return account


class InMemoryUserDirectory(BaseUserDirectory):
    """
    Process-local account directory.

    Accounts are indexed by identifier and by normalized email. A lock
    guards the check-then-insert sequence of ``register``; password
    hashing runs outside it.
    """

    def __init__(self):
        self._accounts: Dict[str, Account] = {}
        self._ids_by_email: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(
        self, email: Optional[str], password: Optional[str], role_hint: Any = None
    ) -> Dict[str, Any]:
        if not isinstance(email, str) or not isinstance(password, str):
            raise ValidationError()
        key = normalize_email(email)
        if not key or not password:
            raise ValidationError()

        # Fail fast before paying for the hash; re-checked under the lock.
        if key in self._ids_by_email:
            raise DuplicateEmailError()

        try:
            password_hash = get_password_hash(password)
        except Exception as e:
            logger.exception("Password hashing failed during registration")
            raise InternalError(details={"error": str(e)}) from e

        account = Account(
            email=email, password_hash=password_hash, role=Role.normalize(role_hint)
        )
        with self._lock:
            if key in self._ids_by_email:
                raise DuplicateEmailError()
            self._accounts[account.id] = account
            self._ids_by_email[key] = account.id

        logger.info(f"Registered account {account.id} with role {account.role.value}")
        return account.to_public()

    def find_by_email(self, email: str) -> Optional[Account]:
        if not isinstance(email, str):
            return None
        account_id = self._ids_by_email.get(normalize_email(email))
        if account_id is None:
            return None
        return self._accounts.get(account_id)

    def find_by_id(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)

    def clear(self) -> None:
        with self._lock:
            self._accounts.clear()
            self._ids_by_email.clear()

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts.values()))
