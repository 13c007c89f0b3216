"""
Middleware for the credential service (CORS only).
"""

from .manager import setup_middlewares

__all__ = ["setup_middlewares"]
