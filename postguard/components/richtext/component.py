"""
Richtext component - XSS safety of rich text block documents.

Every text leaf reachable from a block's data payload must be free of
script injection. Formatting markup from the safelist is allowed.

Invariants:
- I1: Blank and malformed documents are valid (structure is checked elsewhere)
- I2: A document is safe iff every text leaf is safe
- I3: Leaf safety is decided on the raw text, never on sanitizer output
- I4: The document is only read, never modified
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

import bleach

from postguard.domain.outcome import ValidationOutcome

from ._impl import iter_document_leaves, parse_document
from .models import DEFAULT_CONFIG, RichTextConfig, TextInspection, UnsafeLeaf

logger = logging.getLogger(__name__)

UNSAFE_MESSAGE = "Content contains unsafe HTML"
EVENT_HANDLER = "event_handler"


@lru_cache(maxsize=8)
def _event_handler_regex(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def normalize_text(text: str, config: RichTextConfig = DEFAULT_CONFIG) -> str:
    """Clean text with the formatting safelist; disallowed tags are stripped."""
    return bleach.clean(
        text,
        tags=config.allow_tags,
        attributes={tag: list(attrs) for tag, attrs in config.allow_attrs.items()},
        protocols=config.allow_protocols,
        strip=True,
    )


def find_banned_pattern(text: str, config: RichTextConfig = DEFAULT_CONFIG) -> str | None:
    """Return the first banned pattern present in text, or None."""
    lower = text.lower()

    for banned in config.banned_substrings:
        if banned in lower:
            return banned

    if _event_handler_regex(config.event_handler_pattern).search(lower):
        return EVENT_HANDLER

    return None


def inspect_text(text: str, config: RichTextConfig = DEFAULT_CONFIG) -> TextInspection:
    """
    Decide whether a single text leaf is safe.

    The normalized form is reported for callers that want to store it, but
    the verdict only depends on banned patterns in the raw text.
    """
    if not text.strip():
        return TextInspection(safe=True, normalized=text)

    normalized = normalize_text(text, config)
    matched = find_banned_pattern(text, config)
    return TextInspection(safe=matched is None, matched=matched, normalized=normalized)


def find_unsafe_leaf(
    document: str | Mapping[str, Any] | None,
    config: RichTextConfig = DEFAULT_CONFIG,
) -> UnsafeLeaf | None:
    """Walk the document and return the first unsafe leaf, if any."""
    parsed = parse_document(document)
    if parsed is None:
        return None

    for path, text in iter_document_leaves(parsed):
        inspection = inspect_text(text, config)
        if not inspection.safe:
            return UnsafeLeaf(path=path, matched=inspection.matched or "")

    return None


def check_rich_text(
    document: str | Mapping[str, Any] | None,
    *,
    field: str = "content",
    config: RichTextConfig = DEFAULT_CONFIG,
) -> ValidationOutcome:
    """
    Validate a rich text document for XSS safety.

    Args:
        document: Serialized or decoded block document.
        field: Request field the violation is reported against.
        config: Safety configuration.

    Returns:
        ValidationOutcome with a violation naming the first unsafe leaf.
    """
    unsafe = find_unsafe_leaf(document, config)
    if unsafe is None:
        return ValidationOutcome.ok()

    logger.info("Rejected rich text: %s matched at %s", unsafe.matched, unsafe.path)
    return ValidationOutcome.reject(
        field,
        "unsafe_content",
        f"{UNSAFE_MESSAGE} (at {unsafe.path})",
    )


def is_safe(
    document: str | Mapping[str, Any] | None,
    config: RichTextConfig = DEFAULT_CONFIG,
) -> bool:
    return find_unsafe_leaf(document, config) is None
