from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from postguard.rules.loader import load_rules
from postguard.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """The real rules file from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """
    Build real encoded image bytes with Pillow.

    Usage: make_image("PNG", (64, 32))
    """

    def _make(fmt: str = "PNG", size: tuple[int, int] = (16, 16)) -> bytes:
        buf = BytesIO()
        Image.new("RGB", size, color=(200, 30, 30)).save(buf, format=fmt)
        return buf.getvalue()

    return _make


@pytest.fixture
def jpeg_bytes(make_image: Callable[..., bytes]) -> bytes:
    return make_image("JPEG", (32, 24))


@pytest.fixture
def png_bytes(make_image: Callable[..., bytes]) -> bytes:
    return make_image("PNG", (32, 24))
