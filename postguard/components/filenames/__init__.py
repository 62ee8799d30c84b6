"""
Filenames component - make user supplied filenames safe to use.
"""

from .component import MAX_FILENAME_CHARS, get_extension, sanitize_filename, stored_filename

__all__ = [
    "MAX_FILENAME_CHARS",
    "get_extension",
    "sanitize_filename",
    "stored_filename",
]
