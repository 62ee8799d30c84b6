"""
Request layer - aggregates field validators and renders rejections.
"""

from .checks import (
    DEFAULT_VALIDATORS,
    Validators,
    check_post,
    check_profile_update,
    check_register,
    enforce,
    enforce_upload,
)
from .errors import RequestValidationFailed, UploadRejected, register_error_handlers
from .schemas import PostRequest, RegisterRequest, UpdateProfileRequest

__all__ = [
    # Request checks
    "check_post",
    "check_profile_update",
    "check_register",
    "enforce",
    "enforce_upload",
    # Configuration
    "DEFAULT_VALIDATORS",
    "Validators",
    # Errors
    "RequestValidationFailed",
    "UploadRejected",
    "register_error_handlers",
    # Schemas
    "PostRequest",
    "RegisterRequest",
    "UpdateProfileRequest",
]
