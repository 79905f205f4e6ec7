"""Directory listing plugin."""

from .routes import create_router
from .schema import DirectoryEntry, FileInfo

__all__ = ["DirectoryEntry", "FileInfo", "create_router"]
