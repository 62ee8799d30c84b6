"""
Password component - password strength policy.
"""

from .component import (
    DEFAULT_CONFIG,
    REQUIRED_MESSAGE,
    TOO_COMMON_MESSAGE,
    check_password,
    is_common,
    is_strong,
    meets_complexity,
    weak_message,
)
from .models import COMMON_PASSWORDS, PasswordConfig

__all__ = [
    # Entry points
    "check_password",
    "is_strong",
    # Helper functions
    "is_common",
    "meets_complexity",
    "weak_message",
    # Configuration
    "COMMON_PASSWORDS",
    "DEFAULT_CONFIG",
    "PasswordConfig",
    # Messages
    "REQUIRED_MESSAGE",
    "TOO_COMMON_MESSAGE",
]
