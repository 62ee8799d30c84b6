"""
Richtext component - XSS safety of rich text block documents.
"""

from ._impl import iter_document_leaves, iter_text_leaves, parse_document
from .component import (
    EVENT_HANDLER,
    UNSAFE_MESSAGE,
    check_rich_text,
    find_banned_pattern,
    find_unsafe_leaf,
    inspect_text,
    is_safe,
    normalize_text,
)
from .models import (
    DEFAULT_CONFIG,
    Block,
    JsonValue,
    RichTextConfig,
    RichTextDocument,
    TextInspection,
    UnsafeLeaf,
)

__all__ = [
    # Entry points
    "check_rich_text",
    "is_safe",
    # Helper functions
    "find_banned_pattern",
    "find_unsafe_leaf",
    "inspect_text",
    "iter_document_leaves",
    "iter_text_leaves",
    "normalize_text",
    "parse_document",
    # Configuration
    "DEFAULT_CONFIG",
    "RichTextConfig",
    # Models
    "Block",
    "JsonValue",
    "RichTextDocument",
    "TextInspection",
    "UnsafeLeaf",
    # Constants
    "EVENT_HANDLER",
    "UNSAFE_MESSAGE",
]
