"""
Uploads component - classify and verify uploaded media files.

Invariants:
- I1: The extension is taken from the sanitized filename only
- I2: Category precedence is image, video, audio ("ogg" is video)
- I3: Size must not exceed the ceiling of the category or entry point
- I4: Images are decoded, never trusted by name or header
- I5: Hostile content is rejected, never raised
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from postguard.components.filenames import get_extension, sanitize_filename

from ._impl import decode_raster, inspect_svg, read_bytes
from .models import (
    MIB,
    DecodeError,
    MediaCategory,
    UploadCandidate,
    UploadConfig,
    UploadVerdict,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = UploadConfig()


@dataclass(frozen=True)
class _Target:
    """What an upload was classified as, and the ceiling that applies."""

    category: MediaCategory
    extension: str
    limit: int


# --- Helper Functions ---


def media_category(extension: str, config: UploadConfig = DEFAULT_CONFIG) -> MediaCategory:
    """Determine media category from extension."""
    if extension in config.image_extensions:
        return MediaCategory.IMAGE
    if extension in config.video_extensions:
        return MediaCategory.VIDEO
    if extension in config.audio_extensions:
        return MediaCategory.AUDIO
    return MediaCategory.UNKNOWN


def size_limit(category: MediaCategory, config: UploadConfig = DEFAULT_CONFIG) -> int:
    """Get the upload ceiling for a category in bytes."""
    limits = {
        MediaCategory.IMAGE: config.image_max_bytes,
        MediaCategory.VIDEO: config.video_max_bytes,
        MediaCategory.AUDIO: config.audio_max_bytes,
    }
    return limits.get(category, config.image_max_bytes)


def _format_size(limit: int) -> str:
    if limit % MIB == 0:
        return f"{limit // MIB}MB"
    return f"{limit} bytes"


def _target(
    candidate: UploadCandidate,
    config: UploadConfig,
    limit: int | None = None,
) -> _Target:
    extension = get_extension(candidate.filename, config.max_filename_chars)
    category = media_category(extension, config)
    return _Target(
        category=category,
        extension=extension,
        limit=size_limit(category, config) if limit is None else limit,
    )


def _accept(
    target: _Target,
    *,
    width: int | None = None,
    height: int | None = None,
    image_format: str | None = None,
) -> UploadVerdict:
    return UploadVerdict(
        category=target.category,
        accepted=True,
        extension=target.extension,
        size_limit=target.limit,
        width=width,
        height=height,
        image_format=image_format,
    )


def _reject(
    candidate: UploadCandidate,
    target: _Target,
    code: str,
    reason: str,
    error: DecodeError | None = None,
) -> UploadVerdict:
    logger.info(
        "Rejected upload %r (%s): %s",
        sanitize_filename(candidate.filename),
        target.category.value,
        code,
    )
    return UploadVerdict(
        category=target.category,
        accepted=False,
        extension=target.extension,
        size_limit=target.limit,
        code=code,
        reason=reason,
        width=error.width if error else None,
        height=error.height if error else None,
    )


def _too_large(candidate: UploadCandidate, target: _Target) -> UploadVerdict:
    return _reject(
        candidate,
        target,
        "file_too_large",
        f"File too large (max {_format_size(target.limit)})",
    )


def _verify(
    candidate: UploadCandidate,
    target: _Target,
    config: UploadConfig,
) -> UploadVerdict:
    """Size check, then deep content verification for images."""
    if candidate.size_bytes > target.limit:
        return _too_large(candidate, target)

    if target.category is not MediaCategory.IMAGE:
        return _accept(target)

    if target.extension == "svg":
        prefix = read_bytes(candidate.content, config.svg_prefix_bytes)
        svg_error = inspect_svg(prefix, config)
        if svg_error is not None:
            return _reject(candidate, target, svg_error.code, svg_error.message)
        return _accept(target, image_format="SVG")

    # One byte past the ceiling exposes content larger than its declared size
    data = read_bytes(candidate.content, target.limit + 1)
    if len(data) > target.limit:
        return _too_large(candidate, target)

    decoded = decode_raster(data, config)
    if isinstance(decoded, DecodeError):
        return _reject(candidate, target, decoded.code, decoded.message, decoded)

    return _accept(
        target,
        width=decoded.width,
        height=decoded.height,
        image_format=decoded.format,
    )


# --- Component Entry Points ---


def classify(
    candidate: UploadCandidate,
    config: UploadConfig = DEFAULT_CONFIG,
) -> UploadVerdict:
    """
    Classify and validate a media upload (image, video or audio).

    Steps:
    1. Sanitize the filename and take its extension
    2. Look up the category; unknown extensions are rejected
    3. Enforce the category ceiling
    4. Images only: verify SVG markup or decode the raster image

    Args:
        candidate: The uploaded file.
        config: Upload limits and allow-lists.

    Returns:
        UploadVerdict naming the category and, on rejection, the failed step.
    """
    target = _target(candidate, config)

    if candidate.size_bytes <= 0:
        return _reject(candidate, target, "empty_file", "File is required")

    if target.category is MediaCategory.UNKNOWN:
        reason = (
            f"Unsupported file type: '{target.extension}'"
            if target.extension
            else "File has no extension"
        )
        return _reject(candidate, target, "unsupported_type", reason)

    return _verify(candidate, target, config)


def check_media_upload(
    candidate: UploadCandidate,
    config: UploadConfig = DEFAULT_CONFIG,
) -> UploadVerdict:
    """Generic media upload endpoint."""
    return classify(candidate, config)


def check_image_upload(
    candidate: UploadCandidate,
    config: UploadConfig = DEFAULT_CONFIG,
) -> UploadVerdict:
    """Image upload endpoint used by the editor; only image extensions pass."""
    target = _target(candidate, config, limit=config.image_max_bytes)

    if candidate.size_bytes <= 0:
        return _reject(candidate, target, "empty_file", "Image file is required")

    if target.category is not MediaCategory.IMAGE:
        return _reject(candidate, target, "unsupported_type", "Invalid image type")

    return _verify(candidate, target, config)


def check_avatar_upload(
    candidate: UploadCandidate | None,
    config: UploadConfig = DEFAULT_CONFIG,
) -> UploadVerdict:
    """
    Avatar upload endpoint.

    The avatar is optional: a missing or empty file is accepted. Otherwise
    the declared MIME type and the extension must both be avatar types, the
    file must fit the avatar ceiling and decode as a raster image.
    """
    if candidate is None or candidate.size_bytes <= 0:
        return UploadVerdict(category=MediaCategory.UNKNOWN, accepted=True)

    target = _target(candidate, config, limit=config.avatar_max_bytes)

    if candidate.content_type not in config.avatar_mime_types:
        return _reject(
            candidate,
            target,
            "invalid_mime_type",
            f"Invalid avatar type: '{candidate.content_type}'",
        )

    if target.extension not in config.avatar_extensions:
        return _reject(candidate, target, "unsupported_type", "Invalid image type")

    return _verify(candidate, target, config)


def check_video_upload(
    candidate: UploadCandidate,
    config: UploadConfig = DEFAULT_CONFIG,
) -> UploadVerdict:
    """Video upload endpoint; needs a video/* MIME type and a video extension."""
    target = _target(candidate, config, limit=config.video_max_bytes)

    if candidate.size_bytes <= 0:
        return _reject(candidate, target, "empty_file", "Video file is required")

    if not (candidate.content_type or "").startswith("video/"):
        return _reject(candidate, target, "invalid_mime_type", "Invalid video file type")

    if target.category is not MediaCategory.VIDEO:
        return _reject(candidate, target, "unsupported_type", "Invalid video file extension")

    return _verify(candidate, target, config)


def is_valid_avatar_url(url: str | None, config: UploadConfig = DEFAULT_CONFIG) -> bool:
    """Check an avatar given by URL; blank means no avatar and is valid."""
    if url is None or not url.strip():
        return True

    lower = url.lower()
    return any(lower.endswith(f".{ext}") for ext in config.avatar_extensions)
