"""
Plaintext component - reject any markup in fields that must stay plain text.

Used for display names and titles. Stricter than script filtering: any tag,
comment or processing instruction makes the value invalid.

Invariants:
- I1: None and blank values are valid (requiredness is checked elsewhere)
- I2: A value without "<" is always valid
- I3: Otherwise the value is valid only if stripping every tag changes nothing
"""

from __future__ import annotations

import bleach

from postguard.domain.outcome import ValidationOutcome

DEFAULT_MESSAGE = "HTML content is not allowed"


def strip_markup(value: str) -> str:
    """Remove every tag and comment, keeping the text content."""
    return bleach.clean(value, tags=[], attributes={}, strip=True, strip_comments=True)


def is_plain_text(value: str | None) -> bool:
    if value is None or not value.strip():
        return True

    # No tag can open without "<"; skip the sanitizer so that entity
    # escaping of "&" or ">" does not count as a difference.
    if "<" not in value:
        return True

    return strip_markup(value) == value


def check_plain_text(
    value: str | None,
    *,
    field: str,
    message: str = DEFAULT_MESSAGE,
) -> ValidationOutcome:
    """
    Validate that a field carries no markup.

    Args:
        value: Field value from the request.
        field: Request field the violation is reported against.
        message: Message shown to the client on rejection.
    """
    if is_plain_text(value):
        return ValidationOutcome.ok()
    return ValidationOutcome.reject(field, "html_not_allowed", message)
