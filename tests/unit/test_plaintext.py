"""
Tests for the plain-text HTML guard.
"""

from __future__ import annotations

import pytest

from postguard.components.plaintext import (
    DEFAULT_MESSAGE,
    check_plain_text,
    is_plain_text,
    strip_markup,
)


class TestPlainValues:
    """Values that carry no markup."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_absent_values_valid(self, value: str | None) -> None:
        """Requiredness is not this guard's concern."""
        assert is_plain_text(value) is True

    @pytest.mark.parametrize(
        "value",
        ["John", "O'Brien", "Tom & Jerry", "3 > 2", "a \"quoted\" word", "Zoë"],
    )
    def test_text_without_tags_valid(self, value: str) -> None:
        """Ampersands and '>' alone are not markup."""
        assert is_plain_text(value) is True


class TestMarkup:
    """Values that contain tags."""

    @pytest.mark.parametrize(
        "value",
        [
            "<b>John</b>",
            "<script>alert(1)</script>",
            "Hello <i>there</i>",
            "<img src=x onerror=alert(1)>",
            "name<!-- comment -->",
        ],
    )
    def test_markup_invalid(self, value: str) -> None:
        assert is_plain_text(value) is False

    def test_strip_keeps_text(self) -> None:
        assert strip_markup("<b>John</b>") == "John"


class TestCheckPlainText:
    def test_ok(self) -> None:
        assert check_plain_text("Jane", field="firstname").valid

    def test_default_message(self) -> None:
        outcome = check_plain_text("<b>x</b>", field="title")
        violation = outcome.first()
        assert violation is not None
        assert violation.field == "title"
        assert violation.code == "html_not_allowed"
        assert violation.message == DEFAULT_MESSAGE

    def test_custom_message(self) -> None:
        outcome = check_plain_text(
            "<b>x</b>", field="firstname", message="First name cannot contain HTML"
        )
        assert outcome.errors_by_field() == {"firstname": "First name cannot contain HTML"}
