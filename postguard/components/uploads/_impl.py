"""
Content inspection for image uploads.

Nothing here raises on hostile input: every failure is returned as a
DecodeError value.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from PIL import Image

from .models import DecodedImage, DecodeError, UploadConfig

logger = logging.getLogger(__name__)


def read_bytes(content: bytes | BinaryIO, limit: int) -> bytes:
    """
    Read at most limit bytes from content.

    File-like content is rewound afterwards when it supports seeking.
    """
    if isinstance(content, bytes | bytearray | memoryview):
        return bytes(content[:limit])

    data = content.read(limit)
    if hasattr(content, "seekable") and content.seekable():
        content.seek(0)
    return data or b""


def inspect_svg(prefix: bytes, config: UploadConfig) -> DecodeError | None:
    """
    Check the leading bytes of an SVG upload.

    The prefix must look like an SVG or XML document and must not carry
    scripts or event handlers.
    """
    if not prefix:
        return DecodeError(code="corrupt_media", message="SVG file is empty")

    text = prefix.decode("utf-8-sig", errors="replace")

    if not text.strip().startswith("<") or ("<svg" not in text and "<?xml" not in text):
        return DecodeError(code="corrupt_media", message="File is not a valid SVG document")

    lower = text.lower()
    for banned in config.svg_banned_substrings:
        if banned in lower:
            return DecodeError(
                code="disallowed_markup",
                message=f"SVG contains disallowed markup: {banned}",
            )

    return None


def decode_raster(data: bytes, config: UploadConfig) -> DecodedImage | DecodeError:
    """
    Decode a raster image fully, within the configured bounds.

    Dimensions are read from the header and checked before any pixel data is
    decoded, which caps the memory a crafted image can claim. The full decode
    then proves the pixel data is intact. Pillow's decompression-bomb
    error applies on top of the dimension bound.
    """
    if not data:
        return DecodeError(code="corrupt_media", message="Image file is empty")

    try:
        with Image.open(io.BytesIO(data), formats=list(config.raster_formats)) as img:
            width, height = img.size
            if width <= 0 or height <= 0:
                return DecodeError(
                    code="dimensions_out_of_bounds",
                    message="Image has no pixels",
                    width=width,
                    height=height,
                )
            if width > config.max_dimension or height > config.max_dimension:
                return DecodeError(
                    code="dimensions_out_of_bounds",
                    message=(
                        f"Image is {width}x{height}, maximum is "
                        f"{config.max_dimension}x{config.max_dimension}"
                    ),
                    width=width,
                    height=height,
                )
            img.load()
            return DecodedImage(width=width, height=height, format=img.format)
    except Exception as e:
        # Covers unidentified, truncated and corrupt files, decompression
        # bombs and MemoryError alike.
        logger.warning("Image decode failed: %s", type(e).__name__)
        return DecodeError(code="corrupt_media", message="File is not a valid image")
