"""Dimension resolution and image resize algorithms."""

from .dimension_resolver import resolve
from .image_resize import (
    RESAMPLING_FILTER,
    RenderedImage,
    SourceImage,
    decode,
    encode,
    image_resize,
    render,
    render_image,
)

__all__ = [
    "RESAMPLING_FILTER",
    "RenderedImage",
    "SourceImage",
    "decode",
    "encode",
    "image_resize",
    "render",
    "render_image",
    "resolve",
]
