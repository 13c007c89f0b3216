"""
credcore - a minimal credential-issuance service.

Registers accounts, verifies credentials at login, and issues bearer
tokens that gate access to protected routes.

Usage:
    from credcore.factory import create_app

    app = create_app()
"""

__version__ = "0.1.0"

# Public API exports
from credcore.accounts import BaseUserDirectory, InMemoryUserDirectory
from credcore.config import BaseAppSettings, get_settings
from credcore.errors import AppError, setup_errors
from credcore.factory import configure_app, create_app
from credcore.logging import get_logger
from credcore.security import issue_token, verify_token
