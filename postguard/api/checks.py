"""
Request-level validation.

Each check calls the field validators explicitly and aggregates their
outcomes into one ValidationOutcome for the whole request. enforce()
turns a failed outcome into the exception the error handlers render.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from postguard.api.errors import RequestValidationFailed, UploadRejected
from postguard.api.schemas import PostRequest, RegisterRequest, UpdateProfileRequest
from postguard.components.password import PasswordConfig, check_password
from postguard.components.plaintext import check_plain_text
from postguard.components.richtext import RichTextConfig, check_rich_text
from postguard.components.uploads import UploadConfig, UploadVerdict, is_valid_avatar_url
from postguard.domain.outcome import ValidationOutcome
from postguard.rules import Rules, password_config, richtext_config, upload_config

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
MEDIA_TYPE_PATTERN = re.compile(r"(image|video|audio)?")
MEDIA_URL_PATTERN = re.compile(r"(https?://.*|/uploads/.*)?")

MAX_TITLE_CHARS = 200
MAX_MEDIA_URL_CHARS = 2048


@dataclass(frozen=True)
class Validators:
    """Component configurations used by the request checks."""

    password: PasswordConfig = field(default_factory=PasswordConfig)
    richtext: RichTextConfig = field(default_factory=RichTextConfig)
    uploads: UploadConfig = field(default_factory=UploadConfig)
    max_content_chars: int = 100_000

    @classmethod
    def from_rules(cls, rules: Rules) -> Validators:
        return cls(
            password=password_config(rules.password),
            richtext=richtext_config(rules.richtext),
            uploads=upload_config(rules.uploads),
            max_content_chars=rules.richtext.max_document_chars,
        )


DEFAULT_VALIDATORS = Validators()


# --- Field Helpers ---


def _required(value: str | None, field_name: str, message: str) -> ValidationOutcome:
    if value is None or not value.strip():
        return ValidationOutcome.reject(field_name, "required", message)
    return ValidationOutcome.ok()


def _length(
    value: str | None,
    field_name: str,
    message: str,
    *,
    min_chars: int = 0,
    max_chars: int | None = None,
) -> ValidationOutcome:
    """Length bounds; None is left to _required."""
    if value is None:
        return ValidationOutcome.ok()
    if len(value) < min_chars or (max_chars is not None and len(value) > max_chars):
        return ValidationOutcome.reject(field_name, "invalid_length", message)
    return ValidationOutcome.ok()


def _email(value: str | None, field_name: str, message: str) -> ValidationOutcome:
    if value is None or EMAIL_PATTERN.fullmatch(value):
        return ValidationOutcome.ok()
    return ValidationOutcome.reject(field_name, "invalid_email", message)


def _avatar_url(value: str | None, config: UploadConfig) -> ValidationOutcome:
    if is_valid_avatar_url(value, config):
        return ValidationOutcome.ok()
    allowed = ", ".join(sorted(config.avatar_extensions))
    return ValidationOutcome.reject(
        "avatar",
        "invalid_avatar",
        f"Avatar must be an image ({allowed})",
    )


def _name(value: str | None, field_name: str, label: str, *, required: bool) -> ValidationOutcome:
    checks = []
    if required:
        checks.append(_required(value, field_name, f"{label} is required"))
    checks.append(
        _length(
            value,
            field_name,
            f"{label} must be between 1 and 30 characters",
            min_chars=1 if required else 0,
            max_chars=30,
        )
    )
    checks.append(
        check_plain_text(value, field=field_name, message=f"{label} cannot contain HTML")
    )
    return ValidationOutcome.merge(*checks)


# --- Request Checks ---


def check_register(
    req: RegisterRequest,
    validators: Validators = DEFAULT_VALIDATORS,
) -> ValidationOutcome:
    """Validate a registration request."""
    password = _required(req.password, "password", "Password is required")
    if password.valid:
        password = check_password(req.password, config=validators.password)

    return ValidationOutcome.merge(
        _required(req.username, "username", "Username is required"),
        _length(
            req.username,
            "username",
            "Username must be between 3 and 20 characters",
            min_chars=3,
            max_chars=20,
        ),
        _required(req.email, "email", "Email is required"),
        _email(req.email, "email", "Email must be valid"),
        password,
        _name(req.first_name, "firstname", "First name", required=True),
        _name(req.last_name, "lastname", "Last name", required=True),
        _avatar_url(req.avatar, validators.uploads),
    )


def check_profile_update(
    req: UpdateProfileRequest,
    validators: Validators = DEFAULT_VALIDATORS,
) -> ValidationOutcome:
    """Validate a profile update; absent fields are left unchanged and not checked."""
    new_password = _length(
        req.new_password,
        "newPassword",
        "Password must be between 8 and 50 characters",
        min_chars=8,
        max_chars=50,
    )
    if new_password.valid and req.new_password is not None:
        new_password = check_password(
            req.new_password,
            field="newPassword",
            config=validators.password,
        )

    return ValidationOutcome.merge(
        _length(
            req.username,
            "username",
            "Username must be between 4 and 30 characters",
            min_chars=4,
            max_chars=30,
        ),
        _email(req.email, "email", "Invalid email format"),
        _name(req.first_name, "firstname", "First name", required=False),
        _name(req.last_name, "lastname", "Last name", required=False),
        _avatar_url(req.avatar, validators.uploads),
        new_password,
    )


def check_post(
    req: PostRequest,
    validators: Validators = DEFAULT_VALIDATORS,
) -> ValidationOutcome:
    """Validate a post creation or update request."""
    max_chars = validators.max_content_chars
    content = ValidationOutcome.merge(
        _required(req.content, "content", "Content is required"),
        _length(
            req.content,
            "content",
            f"Content must be between 1 and {max_chars} characters",
            min_chars=1,
            max_chars=max_chars,
        ),
    )
    if content.valid:
        content = check_rich_text(req.content, field="content", config=validators.richtext)

    media_type = ValidationOutcome.ok()
    if req.media_type is not None and not MEDIA_TYPE_PATTERN.fullmatch(req.media_type):
        media_type = ValidationOutcome.reject(
            "media_type",
            "invalid_media_type",
            "Media type must be 'image', 'video', 'audio', or empty",
        )

    media_url = _length(
        req.media_url,
        "media_url",
        f"Media URL must not exceed {MAX_MEDIA_URL_CHARS} characters",
        max_chars=MAX_MEDIA_URL_CHARS,
    )
    if req.media_url is not None and not MEDIA_URL_PATTERN.fullmatch(req.media_url):
        media_url = ValidationOutcome.merge(
            media_url,
            ValidationOutcome.reject(
                "media_url",
                "invalid_media_url",
                "Media URL must be a valid HTTP/HTTPS URL or relative upload path",
            ),
        )

    return ValidationOutcome.merge(
        check_plain_text(req.title, field="title", message="Title cannot contain HTML"),
        _length(
            req.title,
            "title",
            f"Title must not exceed {MAX_TITLE_CHARS} characters",
            max_chars=MAX_TITLE_CHARS,
        ),
        content,
        media_type,
        media_url,
    )


# --- Enforcement ---


def enforce(outcome: ValidationOutcome) -> None:
    """Raise RequestValidationFailed if the outcome has violations."""
    if not outcome.valid:
        raise RequestValidationFailed(outcome)


def enforce_upload(verdict: UploadVerdict, field_name: str = "file") -> UploadVerdict:
    """Return an accepted verdict; raise UploadRejected otherwise."""
    if not verdict.accepted:
        raise UploadRejected(verdict, field_name)
    return verdict
