"""
Uploads component - classify and verify uploaded media files.
"""

from ._impl import decode_raster, inspect_svg, read_bytes
from .component import (
    DEFAULT_CONFIG,
    check_avatar_upload,
    check_image_upload,
    check_media_upload,
    check_video_upload,
    classify,
    is_valid_avatar_url,
    media_category,
    size_limit,
)
from .models import (
    MIB,
    DecodedImage,
    DecodeError,
    MediaCategory,
    UploadCandidate,
    UploadConfig,
    UploadVerdict,
)

__all__ = [
    # Entry points
    "classify",
    "check_avatar_upload",
    "check_image_upload",
    "check_media_upload",
    "check_video_upload",
    "is_valid_avatar_url",
    # Helper functions
    "decode_raster",
    "inspect_svg",
    "media_category",
    "read_bytes",
    "size_limit",
    # Configuration
    "DEFAULT_CONFIG",
    "MIB",
    "UploadConfig",
    # Models
    "DecodedImage",
    "DecodeError",
    "MediaCategory",
    "UploadCandidate",
    "UploadVerdict",
]
