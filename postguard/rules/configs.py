"""
Build component configurations from validated rules.
"""

from __future__ import annotations

from postguard.components.password import PasswordConfig
from postguard.components.richtext import RichTextConfig
from postguard.components.uploads import UploadConfig
from postguard.rules.models import PasswordRules, RichTextRules, UploadsRules


def password_config(rules: PasswordRules) -> PasswordConfig:
    return PasswordConfig(
        min_length=rules.min_length,
        special_characters=rules.special_characters,
        denylist=frozenset(entry.lower() for entry in rules.denylist),
    )


def richtext_config(rules: RichTextRules) -> RichTextConfig:
    safelist = rules.safelist
    return RichTextConfig(
        allow_tags=frozenset(safelist.tags),
        allow_attrs={tag: frozenset(attrs) for tag, attrs in safelist.attributes.items()},
        allow_protocols=frozenset(safelist.protocols),
        banned_substrings=tuple(entry.lower() for entry in rules.banned_substrings),
        event_handler_pattern=rules.event_handler_pattern,
    )


def upload_config(rules: UploadsRules) -> UploadConfig:
    return UploadConfig(
        image_extensions=frozenset(rules.image.extensions),
        video_extensions=frozenset(rules.video.extensions),
        audio_extensions=frozenset(rules.audio.extensions),
        image_max_bytes=rules.image.max_upload_bytes,
        video_max_bytes=rules.video.max_upload_bytes,
        audio_max_bytes=rules.audio.max_upload_bytes,
        avatar_extensions=frozenset(rules.avatar.extensions),
        avatar_mime_types=frozenset(rules.avatar.mime_types),
        avatar_max_bytes=rules.avatar.max_upload_bytes,
        max_dimension=rules.inspection.max_dimension,
        svg_prefix_bytes=rules.inspection.svg_prefix_bytes,
        svg_banned_substrings=tuple(rules.inspection.svg_banned_substrings),
        max_filename_chars=rules.max_filename_chars,
    )
