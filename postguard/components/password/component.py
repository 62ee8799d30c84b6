"""
Password component - password strength policy.

Invariants:
- I1: None is never a valid password
- I2: A denylisted password is rejected even if it is complex enough
- I3: Only ASCII letters, digits and the configured special characters are allowed
"""

from __future__ import annotations

import re
from functools import lru_cache

from postguard.domain.outcome import ValidationOutcome

from .models import PasswordConfig

DEFAULT_CONFIG = PasswordConfig()

REQUIRED_MESSAGE = "Password is required"
TOO_COMMON_MESSAGE = "Password is too common"


def weak_message(config: PasswordConfig = DEFAULT_CONFIG) -> str:
    return (
        f"Password must be at least {config.min_length} characters long and contain "
        "at least one uppercase letter, one lowercase letter, one digit, "
        f"and one special character ({config.special_characters})"
    )


@lru_cache(maxsize=8)
def _strength_pattern(min_length: int, special_characters: str) -> re.Pattern[str]:
    special = re.escape(special_characters)
    return re.compile(
        rf"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[{special}])[A-Za-z0-9{special}]{{{min_length},}}",
        re.DOTALL,
    )


def is_common(password: str, config: PasswordConfig = DEFAULT_CONFIG) -> bool:
    """Check the password against the denylist, ignoring case."""
    return password.lower() in config.denylist


def meets_complexity(password: str, config: PasswordConfig = DEFAULT_CONFIG) -> bool:
    pattern = _strength_pattern(config.min_length, config.special_characters)
    return pattern.fullmatch(password) is not None


def check_password(
    password: str | None,
    *,
    field: str = "password",
    config: PasswordConfig = DEFAULT_CONFIG,
) -> ValidationOutcome:
    """
    Validate a password against the strength policy.

    Args:
        password: Raw password from the request, possibly None.
        field: Request field the violation is reported against.
        config: Policy configuration.

    Returns:
        ValidationOutcome with at most one violation.
    """
    if password is None:
        return ValidationOutcome.reject(field, "password_required", REQUIRED_MESSAGE)

    if is_common(password, config):
        return ValidationOutcome.reject(field, "password_too_common", TOO_COMMON_MESSAGE)

    if not meets_complexity(password, config):
        return ValidationOutcome.reject(field, "password_weak", weak_message(config))

    return ValidationOutcome.ok()


def is_strong(password: str | None, config: PasswordConfig = DEFAULT_CONFIG) -> bool:
    return check_password(password, config=config).valid
