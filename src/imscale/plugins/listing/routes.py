"""Directory listing route factory."""

from fastapi import APIRouter
from loguru import logger

from ...common.config import ServiceConfig
from ...common.image_storage import ImageStorage
from ...utils.media_types import EntryType
from ...utils.timestamp import toRfc3339
from .schema import DirectoryEntry, FileInfo


def create_router(storage: ImageStorage, config: ServiceConfig) -> APIRouter:
    router = APIRouter()

    @router.get("/list/", response_model=list[DirectoryEntry])
    async def list_root() -> list[DirectoryEntry]:
        return await list_path("")

    @router.get("/list/{path:path}", response_model=list[DirectoryEntry] | FileInfo)
    async def list_path(path: str) -> list[DirectoryEntry] | FileInfo:
        full_path = storage.resolve(path)
        logger.info(f"Attempting to list path: {full_path}")

        stored = storage.stat(full_path)
        if stored.entry_type == EntryType.DIRECTORY:
            return [DirectoryEntry.from_stored(entry) for entry in storage.list_directory(full_path)]

        width, height = 0, 0
        if stored.entry_type == EntryType.IMAGE:
            width, height = storage.image_dimensions(full_path)

        return FileInfo(
            name=stored.name,
            type=stored.entry_type,
            size=stored.size,
            modified=toRfc3339(stored.modified),
            width=width,
            height=height,
            download_url=f"/download/{path}",
        )

    _ = list_root
    _ = config
    return router
