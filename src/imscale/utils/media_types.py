from enum import StrEnum
from pathlib import Path

from PIL import Image

IMAGE_EXTENSIONS = frozenset(
    {"jpg", "jpeg", "png", "gif", "bmp", "ico", "tiff", "webp", "avif"}
)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Multi-picture JPEGs are served as their primary JPEG frame.
FORMAT_ALIASES = {"MPO": "JPEG"}


class EntryType(StrEnum):
    DIRECTORY = "directory"
    IMAGE = "image"
    FILE = "file"

    @classmethod
    def from_path(cls, path: Path) -> "EntryType":
        if path.is_dir():
            return EntryType.DIRECTORY
        if path.suffix.lstrip(".").lower() in IMAGE_EXTENSIONS:
            return EntryType.IMAGE
        return EntryType.FILE


def content_type_for(image_format: str | None) -> str:
    """Map a Pillow format tag (e.g. "PNG") to its MIME type."""
    if not image_format:
        return DEFAULT_CONTENT_TYPE
    image_format = image_format.upper()
    Image.init()
    return Image.MIME.get(FORMAT_ALIASES.get(image_format, image_format), DEFAULT_CONTENT_TYPE)
