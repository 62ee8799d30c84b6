"""
Uploads component models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import BinaryIO

from postguard.domain.outcome import ValidationOutcome

MIB = 1024 * 1024


class MediaCategory(StrEnum):
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    UNKNOWN = "unknown"


# --- Input Models ---


@dataclass(frozen=True)
class UploadCandidate:
    """A file received from a multipart upload."""

    filename: str | None
    size_bytes: int
    content: bytes | BinaryIO
    content_type: str | None = None


# --- Configuration Models ---


@dataclass(frozen=True)
class UploadConfig:
    """Upload limits and allow-lists from rules."""

    image_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset(["jpg", "jpeg", "png", "gif", "webp", "svg"])
    )
    video_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset(["mp4", "webm", "ogg", "mov", "avi"])
    )
    audio_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset(["mp3", "wav", "ogg", "m4a"])
    )

    image_max_bytes: int = 10 * MIB
    video_max_bytes: int = 100 * MIB
    audio_max_bytes: int = 50 * MIB

    avatar_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset(["jpg", "jpeg", "png", "gif", "webp"])
    )
    avatar_mime_types: frozenset[str] = field(
        default_factory=lambda: frozenset(["image/jpeg", "image/png", "image/gif", "image/webp"])
    )
    avatar_max_bytes: int = 5 * MIB

    # Deep inspection
    max_dimension: int = 10_000
    svg_prefix_bytes: int = 1024
    svg_banned_substrings: tuple[str, ...] = ("<script", "javascript:", "onerror=", "onload=")
    raster_formats: tuple[str, ...] = ("JPEG", "PNG", "GIF", "WEBP")

    max_filename_chars: int = 255


# --- Decode Results ---


@dataclass(frozen=True)
class DecodedImage:
    """A raster image that decoded completely."""

    width: int
    height: int
    format: str | None = None


@dataclass(frozen=True)
class DecodeError:
    """Why an image could not be accepted."""

    code: str
    message: str
    width: int | None = None
    height: int | None = None


# --- Output Models ---


@dataclass(frozen=True)
class UploadVerdict:
    """Accept/reject decision for one uploaded file."""

    category: MediaCategory
    accepted: bool
    extension: str = ""
    size_limit: int = 0
    code: str | None = None
    reason: str = ""
    width: int | None = None
    height: int | None = None
    image_format: str | None = None

    def to_outcome(self, field: str = "file") -> ValidationOutcome:
        if self.accepted:
            return ValidationOutcome.ok()
        return ValidationOutcome.reject(field, self.code or "rejected", self.reason)
