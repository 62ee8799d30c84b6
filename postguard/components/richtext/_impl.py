"""
Rich text document parsing and tree walking.

Parsing is lenient on purpose: anything that is not recognisably a block
document yields None and is left to the format validator.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from typing import Any

from .models import Block, JsonValue, RichTextDocument


def parse_document(raw: str | Mapping[str, Any] | None) -> RichTextDocument | None:
    """
    Parse a serialized or decoded block document.

    Returns None for blank input, invalid JSON, or an unrecognised top-level
    shape (not an object, no "blocks", "blocks" not a list).
    """
    if raw is None:
        return None

    if isinstance(raw, str):
        if not raw.strip():
            return None
        try:
            root: Any = json.loads(raw)
        except (ValueError, RecursionError):
            return None
    else:
        root = raw

    if not isinstance(root, Mapping):
        return None

    blocks = root.get("blocks")
    if not isinstance(blocks, list):
        return None

    parsed: list[Block] = []
    for i, block in enumerate(blocks):
        if not isinstance(block, Mapping):
            continue
        block_type = block.get("type")
        parsed.append(
            Block(
                index=i,
                type=block_type if isinstance(block_type, str) else "",
                data=block.get("data"),
            )
        )

    return RichTextDocument(blocks=tuple(parsed))


def iter_text_leaves(value: JsonValue, path: str) -> Iterator[tuple[str, str]]:
    """
    Yield (path, text) for every string leaf under value, in document order.

    Objects and arrays are descended into; numbers, booleans and null are not
    leaves. Uses an explicit stack so deeply nested input cannot exhaust the
    interpreter's recursion limit.
    """
    stack: list[tuple[str, JsonValue]] = [(path, value)]
    while stack:
        node_path, node = stack.pop()
        if isinstance(node, str):
            yield node_path, node
        elif isinstance(node, Mapping):
            children = [(f"{node_path}.{key}", child) for key, child in node.items()]
            stack.extend(reversed(children))
        elif isinstance(node, list):
            children = [(f"{node_path}[{i}]", child) for i, child in enumerate(node)]
            stack.extend(reversed(children))


def iter_document_leaves(document: RichTextDocument) -> Iterator[tuple[str, str]]:
    """Yield every text leaf of every block's data payload."""
    for block in document.blocks:
        yield from iter_text_leaves(block.data, f"blocks[{block.index}].data")
