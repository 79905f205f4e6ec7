"""imscale - serve images from a directory, resized on the fly."""

from .app import create_app
from .common.config import ServiceConfig
from .common.errors import (
    DecodeFailed,
    DimensionError,
    EncodeFailed,
    ImscaleError,
    InvalidRequestedSize,
    InvalidSourceImage,
    PipelineError,
)
from .common.image_storage import ImageStorage
from .common.schemas import ImageDimensions, ResizeRequest, ResolvedTarget
from .master import create_master_router
from .plugins.image_resize.algo import image_resize, render, resolve

__version__ = "0.1.0"

__all__ = [
    "DecodeFailed",
    "DimensionError",
    "EncodeFailed",
    "ImageDimensions",
    "ImageStorage",
    "ImscaleError",
    "InvalidRequestedSize",
    "InvalidSourceImage",
    "PipelineError",
    "ResizeRequest",
    "ResolvedTarget",
    "ServiceConfig",
    "__version__",
    "create_app",
    "create_master_router",
    "image_resize",
    "render",
    "resolve",
]
