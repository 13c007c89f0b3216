"""
Password handling utilities.

This module provides functions for hashing and verifying passwords
using bcrypt through the passlib library. Each hash carries its own
random salt and work factor, so verification needs nothing but the
stored digest.

The ``bcrypt_sha256`` scheme runs the password through HMAC-SHA256
before bcrypt, so the whole password counts (plain bcrypt stops at
72 bytes) and NUL bytes are accepted.
"""

from passlib.context import CryptContext  # type: ignore

DEFAULT_HASH_ROUNDS = 12

# Create a password context for bcrypt hashing
pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=DEFAULT_HASH_ROUNDS,
)


def configure_password_hashing(rounds: int = DEFAULT_HASH_ROUNDS) -> None:
    """
    Set the bcrypt work factor used for new hashes.

    Existing digests keep verifying regardless of the factor they were
    created with.

    Args:
        rounds: log2 of the bcrypt iteration count (4-31)
    """
    pwd_context.update(bcrypt_sha256__rounds=rounds)


def get_password_hash(password: str) -> str:
    """
    Generate a bcrypt hash for a plaintext password.

    Args:
        password: The plaintext password to hash

    Returns:
        The hashed password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify that a plaintext password matches a hashed password.

    Malformed or foreign digests count as a mismatch.

    Args:
        plain_password: The plaintext password to verify
        hashed_password: The hashed password to check against

    Returns:
        True if the password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except Exception:
        return False
