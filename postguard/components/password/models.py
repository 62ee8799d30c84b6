"""
Password component configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

COMMON_PASSWORDS: frozenset[str] = frozenset(
    [
        "password",
        "password1",
        "password123",
        "password123!",
        "p@ssword1",
        "p@ssw0rd",
        "12345678",
        "123456789",
        "1234567890",
        "87654321",
        "11111111",
        "00000000",
        "qwerty123",
        "qwertyuiop",
        "qwerty12",
        "abc12345",
        "abcd1234",
        "iloveyou",
        "iloveyou1",
        "admin123",
        "welcome1",
        "welcome123",
        "letmein1",
        "letmein123",
        "sunshine1",
        "monkey123",
        "football1",
        "baseball1",
        "trustno1",
        "changeme",
        "changeme1",
    ]
)


@dataclass(frozen=True)
class PasswordConfig:
    """Password policy configuration from rules."""

    min_length: int = 8
    special_characters: str = "@$!%*?&"

    # Lower-cased; matched case-insensitively against the whole password
    denylist: frozenset[str] = field(default_factory=lambda: COMMON_PASSWORDS)
