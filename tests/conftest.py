"""Test configuration and fixtures for imscale.

This module provides:
- Encoded sample images (built by tests/utils/image_builders.py)
- An image directory laid out like a real deployment
- ServiceConfig / ImageStorage / TestClient fixtures
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from imscale.app import create_app
from imscale.common.config import ServiceConfig
from imscale.common.image_storage import ImageStorage
from tests.utils.image_builders import encode_image, make_image, rotated_jpeg

# ============================================================================
# Byte Fixtures
# ============================================================================


@pytest.fixture
def png_bytes() -> bytes:
    """800x600 RGB PNG."""
    return encode_image(make_image(800, 600), "PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    """800x600 RGB JPEG."""
    return encode_image(make_image(800, 600), "JPEG")


@pytest.fixture
def rgba_png_bytes() -> bytes:
    """64x48 RGBA PNG."""
    return encode_image(make_image(64, 48, mode="RGBA"), "PNG")


@pytest.fixture
def gif_bytes() -> bytes:
    """40x30 palette GIF."""
    return encode_image(make_image(40, 30).convert("P"), "GIF")


@pytest.fixture
def rotated_jpeg_bytes() -> bytes:
    """Stored 80x60, displayed 60x80 (EXIF orientation 6)."""
    return rotated_jpeg(80, 60)


@pytest.fixture
def make_png() -> Callable[[int, int], bytes]:
    def _make(width: int, height: int) -> bytes:
        return encode_image(make_image(width, height), "PNG")

    return _make


# ============================================================================
# Directory Fixtures
# ============================================================================


@pytest.fixture
def image_dir(
    tmp_path: Path,
    png_bytes: bytes,
    jpeg_bytes: bytes,
    gif_bytes: bytes,
    rotated_jpeg_bytes: bytes,
) -> Path:
    """Image directory with a mix of good, bad and hidden entries.

    Layout:
        images/
            landscape.png       800x600 PNG
            photo.jpg           800x600 JPEG
            palette.gif         40x30 GIF
            rotated.jpg         EXIF-rotated, displays as 60x80
            mislabeled.jpg      PNG bytes behind a .jpg name
            corrupt.png         not an image
            notes.txt           plain text
            .hidden.png         hidden file
            .secret/inside.png  hidden directory
            sub/nested.png      100x50 PNG
    """
    root = tmp_path / "images"
    root.mkdir()

    _ = (root / "landscape.png").write_bytes(png_bytes)
    _ = (root / "photo.jpg").write_bytes(jpeg_bytes)
    _ = (root / "palette.gif").write_bytes(gif_bytes)
    _ = (root / "rotated.jpg").write_bytes(rotated_jpeg_bytes)
    _ = (root / "mislabeled.jpg").write_bytes(png_bytes)
    _ = (root / "corrupt.png").write_bytes(b"definitely not a png")
    _ = (root / "notes.txt").write_text("hello", encoding="utf-8")
    _ = (root / ".hidden.png").write_bytes(png_bytes)

    secret = root / ".secret"
    secret.mkdir()
    _ = (secret / "inside.png").write_bytes(png_bytes)

    sub = root / "sub"
    sub.mkdir()
    _ = (sub / "nested.png").write_bytes(encode_image(make_image(100, 50), "PNG"))

    return root


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    public = tmp_path / "public"
    public.mkdir()
    _ = (public / "index.html").write_text(
        "<!doctype html><title>imscale demo</title>", encoding="utf-8"
    )
    return public


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def service_config(image_dir: Path, public_dir: Path) -> ServiceConfig:
    return ServiceConfig(image_dir=image_dir, public_dir=public_dir, cache_max_age=3600)


@pytest.fixture
def storage(image_dir: Path) -> ImageStorage:
    return ImageStorage(image_dir)


@pytest.fixture
def api_client(service_config: ServiceConfig) -> TestClient:
    """Provide FastAPI TestClient for route testing."""
    return TestClient(create_app(service_config))
