"""
Tests for the HTTP rendering of validation failures.

Uses a throwaway FastAPI app wired the way a host application would be.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from httpx import Response

from postguard.api import (
    RegisterRequest,
    Validators,
    check_register,
    enforce,
    enforce_upload,
    register_error_handlers,
)
from postguard.api.deps import get_rules, get_validators, upload_candidate
from postguard.components.filenames import stored_filename
from postguard.components.uploads import (
    UploadCandidate,
    check_avatar_upload,
    check_image_upload,
    check_video_upload,
)
from postguard.rules import Rules

# --- Fixtures ---


@pytest.fixture
def app(rules: Rules) -> FastAPI:
    """App with register and upload routes."""
    app = FastAPI()
    register_error_handlers(app)
    app.dependency_overrides[get_rules] = lambda: rules

    @app.post("/api/auth/register")
    def register(
        req: RegisterRequest,
        validators: Validators = Depends(get_validators),
    ) -> dict[str, str]:
        enforce(check_register(req, validators))
        return {"status": "ok"}

    @app.post("/api/upload/image")
    def upload_image(
        candidate: UploadCandidate = Depends(upload_candidate),
        validators: Validators = Depends(get_validators),
    ) -> dict[str, Any]:
        verdict = enforce_upload(check_image_upload(candidate, validators.uploads))
        return {"success": 1, "file": {"url": f"/uploads/{stored_filename(verdict.extension)}"}}

    @app.post("/api/upload/avatar")
    def upload_avatar(
        candidate: UploadCandidate = Depends(upload_candidate),
        validators: Validators = Depends(get_validators),
    ) -> dict[str, Any]:
        verdict = enforce_upload(check_avatar_upload(candidate, validators.uploads), "avatar")
        return {"success": 1, "url": f"/uploads/{stored_filename(verdict.extension, prefix='avatar_')}"}

    @app.post("/api/upload/video")
    def upload_video(
        candidate: UploadCandidate = Depends(upload_candidate),
        validators: Validators = Depends(get_validators),
    ) -> dict[str, Any]:
        enforce_upload(check_video_upload(candidate, validators.uploads), "video")
        return {"success": 1}

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def post_file(client: TestClient) -> Callable[..., Response]:
    def _post(path: str, filename: str, content: bytes, content_type: str) -> Response:
        return client.post(path, files={"file": (filename, io.BytesIO(content), content_type)})

    return _post


# --- Request validation ---


class TestValidationResponse:
    def test_valid_request(self, client: TestClient) -> None:
        response = client.post(
            "/api/auth/register",
            json={
                "username": "jane",
                "email": "jane@example.com",
                "password": "Passw0rd!",
                "firstname": "Jane",
                "lastname": "Doe",
            },
        )
        assert response.status_code == 200

    def test_error_body(self, client: TestClient) -> None:
        """Rejections render as a 400 with a per-field error map."""
        response = client.post(
            "/api/auth/register",
            json={
                "username": "jane",
                "email": "jane@example.com",
                "password": "password",
                "firstname": "<b>Jane</b>",
                "lastname": "Doe",
            },
        )
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["code"] == 400
        assert body["details"] == {
            "password": "Password is too common",
            "firstname": "First name cannot contain HTML",
        }
        assert isinstance(body["timestamp"], int)

    def test_empty_body_lists_required_fields(self, client: TestClient) -> None:
        response = client.post("/api/auth/register", json={})
        assert response.status_code == 400
        assert set(response.json()["details"]) == {
            "username",
            "email",
            "password",
            "firstname",
            "lastname",
        }


# --- Uploads ---


class TestUploadResponse:
    def test_image_accepted(self, post_file: Callable[..., Response], png_bytes: bytes) -> None:
        response = post_file("/api/upload/image", "a.png", png_bytes, "image/png")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] == 1
        assert body["file"]["url"].endswith(".png")

    def test_svg_with_script_rejected(self, post_file: Callable[..., Response]) -> None:
        svg = b'<svg xmlns="http://www.w3.org/2000/svg" onload="alert(1)"></svg>'
        response = post_file("/api/upload/image", "evil.svg", svg, "image/svg+xml")
        assert response.status_code == 400
        assert response.json() == {
            "success": 0,
            "error": "SVG contains disallowed markup: onload=",
            "code": "disallowed_markup",
        }

    def test_traversal_filename(self, post_file: Callable[..., Response], png_bytes: bytes) -> None:
        response = post_file("/api/upload/image", "../../etc/a.png", png_bytes, "image/png")
        assert response.status_code == 200
        assert "etc" not in response.json()["file"]["url"]

    def test_avatar_prefix(self, post_file: Callable[..., Response], jpeg_bytes: bytes) -> None:
        response = post_file("/api/upload/avatar", "me.jpg", jpeg_bytes, "image/jpeg")
        assert response.status_code == 200
        assert response.json()["url"].startswith("/uploads/avatar_")

    def test_avatar_bad_mime(self, post_file: Callable[..., Response], jpeg_bytes: bytes) -> None:
        response = post_file("/api/upload/avatar", "me.jpg", jpeg_bytes, "application/pdf")
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_mime_type"

    def test_video_needs_video_mime(self, post_file: Callable[..., Response]) -> None:
        response = post_file("/api/upload/video", "clip.mp4", b"\0" * 64, "image/png")
        assert response.status_code == 400
        assert response.json()["code"] == "invalid_mime_type"

    def test_video_accepted(self, post_file: Callable[..., Response]) -> None:
        response = post_file("/api/upload/video", "clip.mp4", b"\0" * 64, "video/mp4")
        assert response.status_code == 200
