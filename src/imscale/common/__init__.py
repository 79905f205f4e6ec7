"""Common module - errors, schemas, configuration and storage."""

from .config import ServiceConfig
from .errors import (
    DecodeFailed,
    DimensionError,
    EncodeFailed,
    ForbiddenPath,
    ImageNotFound,
    ImscaleError,
    InvalidRequestedSize,
    InvalidSourceImage,
    PipelineError,
    StorageError,
)
from .image_storage import ImageStorage, StoredFile
from .logging import configure_logging
from .schemas import ImageDimensions, ResizeRequest, ResolvedTarget

__all__ = [
    "DecodeFailed",
    "DimensionError",
    "EncodeFailed",
    "ForbiddenPath",
    "ImageDimensions",
    "ImageNotFound",
    "ImageStorage",
    "ImscaleError",
    "InvalidRequestedSize",
    "InvalidSourceImage",
    "PipelineError",
    "ResizeRequest",
    "ResolvedTarget",
    "ServiceConfig",
    "StorageError",
    "StoredFile",
    "configure_logging",
]
