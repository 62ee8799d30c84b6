"""
Plaintext component - reject any markup in plain-text fields.
"""

from .component import DEFAULT_MESSAGE, check_plain_text, is_plain_text, strip_markup

__all__ = [
    "DEFAULT_MESSAGE",
    "check_plain_text",
    "is_plain_text",
    "strip_markup",
]
