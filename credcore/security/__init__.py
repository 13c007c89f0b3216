"""
Security module root.

This module provides password hashing, token issuance and verification,
and the FastAPI dependencies that guard protected routes.

Limitations:
- Only password-based bearer token authentication
- No refresh tokens or token revocation
- No multi-factor authentication
- Single role tag per account, no permission system
"""

from credcore.security.dependencies import (
    authorize,
    extract_bearer_token,
    get_current_account,
    get_directory,
    get_token_claims,
)
from credcore.security.manager import setup_security
from credcore.security.password import (
    configure_password_hashing,
    get_password_hash,
    verify_password,
)
from credcore.security.tokens import Claims, TokenType, issue_token, verify_token

__all__ = [
    # Token functions
    "issue_token",
    "verify_token",
    # Password utilities
    "get_password_hash",
    "verify_password",
    "configure_password_hashing",
    # Models and types
    "Claims",
    "TokenType",
    # Setup function
    "setup_security",
    # FastAPI dependencies
    "extract_bearer_token",
    "authorize",
    "get_token_claims",
    "get_current_account",
    "get_directory",
]
