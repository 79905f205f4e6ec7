"""Image download / resize route factory."""

from typing import Annotated

from fastapi import APIRouter, Query, Response
from loguru import logger
from starlette.concurrency import run_in_threadpool

from ...common.config import ServiceConfig
from ...common.image_storage import ImageStorage
from ...common.schemas import ResizeRequest
from ...utils.timestamp import toHttpDate
from .algo.image_resize import image_resize


def create_router(storage: ImageStorage, config: ServiceConfig) -> APIRouter:
    """Create router with injected dependencies.

    Args:
        storage: ImageStorage over the configured image directory
        config: Service configuration (cache headers)

    Returns:
        Configured APIRouter with the download endpoint
    """
    router = APIRouter()

    @router.get("/download/{path:path}")
    async def download_image(
        path: str,
        width: Annotated[str | None, Query(description="Target width in pixels")] = None,
        height: Annotated[str | None, Query(description="Target height in pixels")] = None,
        preserve_aspect_ratio: Annotated[
            str | None,
            Query(description="Fit inside width x height instead of stretching"),
        ] = None,
    ) -> Response:
        """Return the image at `path`, resized when width and/or height are given.

        The output keeps the source's encoded format, detected from content.
        """
        request = ResizeRequest.from_query(width, height, preserve_aspect_ratio)

        full_path = storage.resolve(path)
        logger.info(f"Attempting to download image: {full_path}")

        stored = storage.stat(full_path)
        source_bytes = await storage.read_bytes(full_path)

        # Decode / resample / encode are CPU-bound
        rendered = await run_in_threadpool(
            image_resize, source_bytes=source_bytes, request=request
        )

        logger.info(
            f"Successfully resized image: {full_path} -> "
            f"{rendered.dimensions.width}x{rendered.dimensions.height} {rendered.format}"
        )
        return Response(
            content=rendered.data,
            media_type=rendered.content_type,
            headers={
                "Last-Modified": toHttpDate(stored.modified),
                "Cache-Control": f"public, max-age={config.cache_max_age}",
            },
        )

    _ = download_image
    return router
