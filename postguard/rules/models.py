from pydantic import BaseModel, Field


class PasswordRules(BaseModel):
    min_length: int = Field(ge=1)
    special_characters: str = Field(min_length=1)
    denylist: list[str]


class RichTextSafelist(BaseModel):
    tags: list[str]
    attributes: dict[str, list[str]]
    protocols: list[str]


class RichTextRules(BaseModel):
    safelist: RichTextSafelist
    banned_substrings: list[str]
    event_handler_pattern: str
    max_document_chars: int


class MediaKindRules(BaseModel):
    extensions: list[str]
    max_upload_bytes: int


class AvatarRules(BaseModel):
    extensions: list[str]
    mime_types: list[str]
    max_upload_bytes: int


class ImageInspectionRules(BaseModel):
    max_dimension: int
    svg_prefix_bytes: int
    svg_banned_substrings: list[str]


class UploadsRules(BaseModel):
    image: MediaKindRules
    video: MediaKindRules
    audio: MediaKindRules
    avatar: AvatarRules
    inspection: ImageInspectionRules
    max_filename_chars: int


class Rules(BaseModel):
    password: PasswordRules
    richtext: RichTextRules
    uploads: UploadsRules
