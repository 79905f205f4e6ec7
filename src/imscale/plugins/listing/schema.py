"""Directory listing response schemas."""

from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

from ...common.image_storage import StoredFile
from ...utils.media_types import EntryType
from ...utils.timestamp import toRfc3339


class DirectoryEntry(BaseModel):
    """One child of a listed directory."""

    name: str
    type: EntryType
    size: int = Field(..., ge=0)
    modified: str = Field(..., description="RFC 3339 modification time (UTC)")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    @classmethod
    def from_stored(cls, stored: StoredFile) -> Self:
        return cls(
            name=stored.name,
            type=stored.entry_type,
            size=stored.size,
            modified=toRfc3339(stored.modified),
        )


class FileInfo(BaseModel):
    """Details of a single file, including image dimensions when readable."""

    name: str
    type: EntryType
    size: int = Field(..., ge=0)
    modified: str = Field(..., description="RFC 3339 modification time (UTC)")
    width: int = Field(0, ge=0, description="Image width, 0 if not a readable image")
    height: int = Field(0, ge=0, description="Image height, 0 if not a readable image")
    download_url: str

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
