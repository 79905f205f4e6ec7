"""Utility helpers: media type classification and timestamps."""

from .media_types import DEFAULT_CONTENT_TYPE, IMAGE_EXTENSIONS, EntryType, content_type_for
from .timestamp import fromModifiedTime, toHttpDate, toRfc3339

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "IMAGE_EXTENSIONS",
    "EntryType",
    "content_type_for",
    "fromModifiedTime",
    "toHttpDate",
    "toRfc3339",
]
