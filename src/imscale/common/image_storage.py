"""
ImageStorage - read-only access to the configured image directory.

Design goals:
- Keep storage as the single authority over paths
- Never resolve outside the base directory, never expose dot-files
- Async reads so request handlers don't block on disk I/O
"""

from __future__ import annotations

from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import ClassVar

import aiofiles
from loguru import logger
from PIL import ExifTags, Image, UnidentifiedImageError
from pydantic import BaseModel, ConfigDict, Field

from ..utils.media_types import EntryType
from ..utils.timestamp import fromModifiedTime
from .errors import ForbiddenPath, ImageNotFound

# EXIF orientations that rotate the image by 90 or 270 degrees
_TRANSPOSED_ORIENTATIONS = frozenset({5, 6, 7, 8})

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class StoredFile(BaseModel):
    """Metadata of a file or directory inside the image directory."""

    name: str = Field(..., description="Base name of the entry")
    entry_type: EntryType = Field(..., description="directory, image or file")
    size: int = Field(..., ge=0, description="Size in bytes")
    modified: datetime = Field(..., description="Last modification time (UTC)")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class ImageStorage:
    """
    Local filesystem view of the image directory.

    Layout:
        base_dir/
            <relative_path>
    """

    def __init__(self, base_dir: str | PathLike[str]):
        self._base_dir: Path = Path(base_dir).expanduser().resolve()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    # ------------------------------------------------------------------
    # Resolving
    # ------------------------------------------------------------------

    def resolve(self, relative_path: str = "") -> Path:
        """
        Resolve and validate a path relative to the image directory.

        Raises:
            ForbiddenPath: On hidden segments or path traversal
        """
        if any(segment.startswith(".") for segment in relative_path.split("/")):
            raise ForbiddenPath(relative_path)

        resolved = (self._base_dir / relative_path).resolve()
        if resolved != self._base_dir and self._base_dir not in resolved.parents:
            raise ForbiddenPath(relative_path)

        return resolved

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def stat(self, path: Path) -> StoredFile:
        """Raises ImageNotFound if `path` does not exist."""
        try:
            st = path.stat()
        except OSError as exc:
            raise ImageNotFound(self._relative(path)) from exc

        return StoredFile(
            name=path.name,
            entry_type=EntryType.from_path(path),
            size=st.st_size,
            modified=fromModifiedTime(st.st_mtime),
        )

    def list_directory(self, path: Path) -> list[StoredFile]:
        """
        List a directory, skipping dot-files and unreadable entries.

        Raises:
            ImageNotFound: If `path` is missing or not a directory
        """
        try:
            children = sorted(path.iterdir(), key=lambda child: child.name)
        except OSError as exc:
            raise ImageNotFound(self._relative(path)) from exc

        entries: list[StoredFile] = []
        for child in children:
            if child.name.startswith("."):
                continue
            try:
                entries.append(self.stat(child))
            except ImageNotFound:
                logger.warning(f"Skipping unreadable entry: {child}")
                continue
        return entries

    @staticmethod
    def image_dimensions(path: Path) -> tuple[int, int]:
        """Read the displayed image size from the header; (0, 0) if it isn't a readable image."""
        try:
            with Image.open(path) as img:
                width, height = img.size
                if img.getexif().get(ExifTags.Base.Orientation) in _TRANSPOSED_ORIENTATIONS:
                    return height, width
                return width, height
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            logger.error(f"Failed to read image dimensions for {path}: {exc}")
            return 0, 0

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    async def read_bytes(self, path: Path) -> bytes:
        """Raises ImageNotFound if `path` is missing or unreadable."""
        if not path.is_file():
            raise ImageNotFound(self._relative(path))
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except OSError as exc:
            raise ImageNotFound(self._relative(path)) from exc

    def _relative(self, path: Path) -> str:
        try:
            return str(path.relative_to(self._base_dir))
        except ValueError:
            return str(path)
