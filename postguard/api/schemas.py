"""
Request payloads checked by the request layer.

Every field is optional at the model level so that missing values are
reported through the same per-field error map as every other constraint.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str | None = None
    email: str | None = None
    password: str | None = None
    first_name: str | None = Field(default=None, alias="firstname")
    last_name: str | None = Field(default=None, alias="lastname")
    avatar: str | None = None


class UpdateProfileRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str | None = None
    email: str | None = None
    first_name: str | None = Field(default=None, alias="firstname")
    last_name: str | None = Field(default=None, alias="lastname")
    avatar: str | None = None
    new_password: str | None = Field(default=None, alias="newPassword")
    current_password: str | None = Field(default=None, alias="currentPassword")


class PostRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    media_type: str | None = None
    media_url: str | None = None
