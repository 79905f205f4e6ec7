"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from .common.config import ServiceConfig
from .common.errors import (
    DimensionError,
    ForbiddenPath,
    ImageNotFound,
    ImscaleError,
    InvalidRequestedSize,
    PipelineError,
)
from .common.image_storage import ImageStorage
from .master import create_master_router

# Most specific first; InvalidSourceImage falls through to DimensionError.
_STATUS_BY_ERROR: list[tuple[type[ImscaleError], int]] = [
    (ForbiddenPath, 403),
    (ImageNotFound, 404),
    (InvalidRequestedSize, 400),
    (DimensionError, 422),
    (PipelineError, 422),
]


def status_for(exc: ImscaleError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


async def handle_imscale_error(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ImscaleError)
    status_code = status_for(exc)
    if status_code >= 422:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """Build the image service.

    Example:
        from imscale.app import create_app
        from imscale.common.config import ServiceConfig

        app = create_app(ServiceConfig(image_dir="./images"))
    """
    config = config or ServiceConfig()
    storage = ImageStorage(config.image_dir)

    app = FastAPI(title="imscale", description="On-the-fly image resizing service")
    app.add_exception_handler(ImscaleError, handle_imscale_error)
    app.include_router(create_master_router(storage, config))

    # Demo page and other static assets, checked after the API routes
    if config.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=config.public_dir, html=True), name="public")
    else:
        logger.warning(f"Public directory not found, static files disabled: {config.public_dir}")

    logger.info(f"Serving images from {storage.base_dir}")
    return app
