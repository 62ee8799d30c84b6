"""
Filenames component - make user supplied filenames safe to use.

Sanitized names are used for extension detection, storage keys and log
lines. Steps run in a fixed order: separators, NUL, parent references,
length.
"""

from __future__ import annotations

from uuid import uuid4

MAX_FILENAME_CHARS = 255


def sanitize_filename(filename: str | None, max_chars: int = MAX_FILENAME_CHARS) -> str:
    """
    Strip path traversal and control characters from a filename.

    Removes "/" and "\\", NUL characters and every ".." substring (one
    left-to-right pass), then truncates to max_chars.
    """
    if not filename:
        return ""

    sanitized = filename.replace("/", "").replace("\\", "")
    sanitized = sanitized.replace("\0", "")
    sanitized = sanitized.replace("..", "")

    return sanitized[:max_chars]


def get_extension(filename: str | None, max_chars: int = MAX_FILENAME_CHARS) -> str:
    """
    Get the lower-cased extension of the sanitized filename.

    Returns "" when there is no dot or nothing follows the last dot.
    """
    if not filename or "." not in filename:
        return ""

    sanitized = sanitize_filename(filename, max_chars)
    _, dot, ext = sanitized.rpartition(".")
    if not dot or not ext:
        return ""
    return ext.lower()


def stored_filename(extension: str, *, prefix: str = "") -> str:
    """
    Generate a collision-free storage name.

    Format: {prefix}{uuid4}.{extension}
    """
    return f"{prefix}{uuid4()}.{extension}"
