"""
Tests for filename sanitization and extension detection.
"""

from __future__ import annotations

import re

import pytest

from postguard.components.filenames import (
    MAX_FILENAME_CHARS,
    get_extension,
    sanitize_filename,
    stored_filename,
)


class TestSanitizeFilename:
    def test_traversal_removed(self) -> None:
        """Separators and parent references are stripped."""
        assert sanitize_filename("../../etc/passwd") == "etcpasswd"

    def test_backslashes_removed(self) -> None:
        assert sanitize_filename("..\\..\\windows\\win.ini") == "windowswin.ini"

    def test_nul_removed(self) -> None:
        assert sanitize_filename("photo.jpg\0.exe") == "photo.jpg.exe"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value: str | None) -> None:
        assert sanitize_filename(value) == ""

    def test_plain_name_unchanged(self) -> None:
        assert sanitize_filename("holiday photo.jpeg") == "holiday photo.jpeg"

    def test_truncated(self) -> None:
        assert len(sanitize_filename("a" * 400 + ".png")) == MAX_FILENAME_CHARS

    @pytest.mark.parametrize(
        "value",
        ["../../etc/passwd", "....//x", ".../...png", "a/./b", "x\0..\0y", "..." * 20],
    )
    def test_idempotent(self, value: str) -> None:
        """Sanitizing an already sanitized name changes nothing."""
        once = sanitize_filename(value)
        assert sanitize_filename(once) == once

    @pytest.mark.parametrize("value", ["../../etc/passwd", "a\\b/c", "x\0y", "....//...."])
    def test_no_dangerous_sequences(self, value: str) -> None:
        result = sanitize_filename(value)
        assert "/" not in result
        assert "\\" not in result
        assert "\0" not in result
        assert ".." not in result


class TestGetExtension:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("photo.jpg", "jpg"),
            ("PHOTO.JPG", "jpg"),
            ("archive.tar.gz", "gz"),
            ("noext", ""),
            ("trailing.", ""),
            (None, ""),
            ("../../evil.svg", "svg"),
        ],
    )
    def test_extension(self, filename: str | None, expected: str) -> None:
        assert get_extension(filename) == expected

    def test_extension_of_sanitized_name(self) -> None:
        """The extension comes from the sanitized name, not the raw one."""
        assert get_extension("image.png/..") == "png"


class TestStoredFilename:
    def test_format(self) -> None:
        name = stored_filename("png", prefix="avatar_")
        assert re.fullmatch(r"avatar_[0-9a-f\-]{36}\.png", name)

    def test_unique(self) -> None:
        assert stored_filename("jpg") != stored_filename("jpg")
