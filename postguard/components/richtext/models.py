"""
Richtext component models.

Documents use the Editor.js block layout:

    {"blocks": [{"type": "paragraph", "data": {"text": "..."}}, ...]}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeAlias

# A decoded JSON value: text, object, array or another scalar
JsonValue: TypeAlias = str | int | float | bool | None | dict[str, Any] | list[Any]


# --- Configuration ---


@dataclass(frozen=True)
class RichTextConfig:
    """Rich text safety configuration from rules."""

    # Formatting safelist used to normalize text leaves
    allow_tags: frozenset[str] = field(
        default_factory=lambda: frozenset(
            [
                "a",
                "b",
                "blockquote",
                "br",
                "cite",
                "code",
                "dd",
                "dl",
                "dt",
                "em",
                "i",
                "li",
                "ol",
                "p",
                "pre",
                "q",
                "small",
                "span",
                "strike",
                "strong",
                "sub",
                "sup",
                "u",
                "ul",
                "h1",
                "h2",
                "h3",
                "h4",
                "h5",
                "h6",
            ]
        )
    )

    allow_attrs: dict[str, frozenset[str]] = field(
        default_factory=lambda: {
            "a": frozenset(["href", "title"]),
            "blockquote": frozenset(["cite"]),
            "q": frozenset(["cite"]),
            "code": frozenset(["class"]),
        }
    )

    allow_protocols: frozenset[str] = field(
        default_factory=lambda: frozenset(["http", "https", "ftp", "mailto"])
    )

    # Checked against the lower-cased raw text, in order
    banned_substrings: tuple[str, ...] = (
        "javascript:",
        "data:text/html",
        "<script",
        "</script>",
        "<iframe",
        "</iframe>",
    )

    # Inline event handler assignment such as ` onerror=`, `/onload =` or `"onclick=`
    event_handler_pattern: str = r"""(?:^|[\s/"'])on\w+\s*="""


DEFAULT_CONFIG = RichTextConfig()


# --- Document ---


@dataclass(frozen=True)
class Block:
    """A single content block. Read-only."""

    index: int
    type: str
    data: JsonValue = None


@dataclass(frozen=True)
class RichTextDocument:
    """A parsed rich text document."""

    blocks: tuple[Block, ...] = ()


# --- Results ---


@dataclass(frozen=True)
class TextInspection:
    """Safety verdict for one text leaf."""

    safe: bool
    matched: str | None = None
    normalized: str = ""


@dataclass(frozen=True)
class UnsafeLeaf:
    """The first unsafe text leaf found in a document."""

    path: str
    matched: str
