"""Pure image resize computation logic (in-memory, single image)."""

import struct
from dataclasses import dataclass
from io import BytesIO
from typing import Final

from loguru import logger
from PIL import ExifTags, Image, ImageOps, UnidentifiedImageError

from ....common.errors import DecodeFailed, EncodeFailed
from ....common.schemas import ImageDimensions, ResizeRequest, ResolvedTarget
from ....utils.media_types import FORMAT_ALIASES, content_type_for
from .dimension_resolver import resolve

# Fixed resampling kernel, used for both up- and down-scaling.
RESAMPLING_FILTER: Final = Image.Resampling.LANCZOS

_IDENTITY_ORIENTATION: Final[int] = 1

# Pillow falls back to nearest-neighbour for these modes.
_UNFILTERED_MODES: Final = frozenset({"P", "1"})


@dataclass(frozen=True)
class SourceImage:
    """Decoded source image, owned by a single request."""

    data: bytes
    image: Image.Image
    dimensions: ImageDimensions
    format: str
    reoriented: bool = False

    def close(self) -> None:
        self.image.close()


@dataclass(frozen=True)
class RenderedImage:
    """Encoded output of the pipeline."""

    data: bytes
    format: str
    content_type: str
    dimensions: ImageDimensions


def decode(source_bytes: bytes) -> SourceImage:
    """
    Decode image bytes, detecting the format from content.

    The EXIF orientation tag is applied, so the reported dimensions are
    the displayed ones.

    Raises:
        DecodeFailed: If the bytes are not a recognised, intact image
        InvalidSourceImage: If the decoded size is degenerate
    """
    reoriented = False
    try:
        img = Image.open(BytesIO(source_bytes))
        image_format = img.format
        img.load()

        orientation = img.getexif().get(ExifTags.Base.Orientation, _IDENTITY_ORIENTATION)
        if orientation != _IDENTITY_ORIENTATION:
            transposed = ImageOps.exif_transpose(img)
            if transposed is not None:
                img = transposed
                reoriented = True
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
        struct.error,
    ) as exc:
        raise DecodeFailed(str(exc)) from exc

    if not image_format:
        raise DecodeFailed("unrecognised image format")
    image_format = FORMAT_ALIASES.get(image_format, image_format)

    width, height = img.size
    return SourceImage(
        data=source_bytes,
        image=img,
        dimensions=ImageDimensions.of(width, height),
        format=image_format,
        reoriented=reoriented,
    )


def encode(img: Image.Image, image_format: str) -> bytes:
    """
    Encode with the format's default settings.

    Raises:
        EncodeFailed: If Pillow has no writer for the format or the write fails
    """
    buffer = BytesIO()
    try:
        img.save(buffer, format=image_format)
    except (KeyError, OSError, ValueError) as exc:
        raise EncodeFailed(image_format, str(exc)) from exc
    return buffer.getvalue()


def _filterable(img: Image.Image) -> Image.Image:
    """Expand palette and bilevel images so the resampling filter applies.

    Palette formats (GIF) are quantized back by the encoder on save.
    """
    if img.mode not in _UNFILTERED_MODES:
        return img
    if img.mode == "1":
        return img.convert("L")
    return img.convert("RGBA" if img.has_transparency_data else "RGB")


def render_image(source: SourceImage, target: ResolvedTarget) -> RenderedImage:
    """
    Resize a decoded image to exactly `target` and re-encode it.

    A target equal to the native size skips resampling. When no
    orientation fix was applied either, the source bytes are returned
    untouched.
    """
    if target == source.dimensions:
        if not source.reoriented:
            logger.debug(f"No-op resize {target.width}x{target.height}, passing source through")
            return RenderedImage(
                data=source.data,
                format=source.format,
                content_type=content_type_for(source.format),
                dimensions=source.dimensions,
            )
        output = source.image
    else:
        working = _filterable(source.image)
        try:
            output = working.resize(target.as_tuple(), RESAMPLING_FILTER)
        except (MemoryError, OverflowError, ValueError) as exc:
            raise EncodeFailed(source.format, f"cannot resample {working.mode} image: {exc}") from exc

    return RenderedImage(
        data=encode(output, source.format),
        format=source.format,
        content_type=content_type_for(source.format),
        dimensions=target,
    )


def render(source_bytes: bytes, target: ResolvedTarget) -> bytes:
    """Decode `source_bytes`, resize to `target` and re-encode in the same format."""
    source = decode(source_bytes)
    try:
        return render_image(source, target).data
    finally:
        source.close()


def image_resize(*, source_bytes: bytes, request: ResizeRequest) -> RenderedImage:
    """
    Resize a single encoded image according to a validated request.

    Framework-agnostic, single-responsibility function.

    Args:
        source_bytes: Encoded source image
        request: Validated width / height / aspect-ratio request

    Returns:
        Rendered image bytes with format and content type

    Raises:
        DecodeFailed: If the source cannot be decoded
        InvalidSourceImage: If the source size is degenerate
        EncodeFailed: If the output cannot be encoded
    """
    source = decode(source_bytes)
    try:
        target = resolve(
            source.dimensions,
            requested_width=request.width,
            requested_height=request.height,
            preserve_aspect_ratio=request.preserve_aspect_ratio,
        )
        return render_image(source, target)
    finally:
        source.close()
