"""
Testing environment specific settings.

This module contains settings that are specific to the testing environment,
such as a cheap password hashing work factor.
"""

from .base import BaseAppSettings


class TestingSettings(BaseAppSettings):
    """
    Settings class for testing environment.

    Enables debug mode and lowers the bcrypt work factor to its minimum so
    that test suites hashing many passwords stay fast.

    Attributes:
        DEBUG: Set to True for detailed test output
        PASSWORD_HASH_ROUNDS: Minimum bcrypt work factor
    """

    DEBUG: bool = True
    PASSWORD_HASH_ROUNDS: int = 4
