"""Pure output-dimension computation for resize requests."""

import math
from fractions import Fraction

from ....common.errors import InvalidRequestedSize, InvalidSourceImage
from ....common.schemas import MAX_DIMENSION, ImageDimensions, ResolvedTarget


def round_half_away(value: Fraction) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + Fraction(1, 2))
    return math.floor(value + Fraction(1, 2))


def _bounded(width: int, height: int) -> ResolvedTarget:
    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise InvalidRequestedSize(f"Resolved size {width}x{height} exceeds {MAX_DIMENSION} pixels per side")
    return ResolvedTarget(width=width, height=height)


def resolve(
    native: ImageDimensions,
    requested_width: int | None = None,
    requested_height: int | None = None,
    preserve_aspect_ratio: bool = False,
) -> ResolvedTarget:
    """
    Resolve the output raster size for a resize request.

    Framework-agnostic, no side effects. Arithmetic is done on exact
    rationals so identical inputs always give identical outputs.

    Args:
        native: Decoded size of the source image
        requested_width: Requested width, or None
        requested_height: Requested height, or None
        preserve_aspect_ratio: Fit inside the requested box when both
            sides are given. Single-side requests always keep the ratio.

    Returns:
        Fully populated target dimensions, both sides >= 1

    Raises:
        InvalidRequestedSize: If a requested side is zero or negative, or a
            side would exceed MAX_DIMENSION
        InvalidSourceImage: If the native size is degenerate
    """
    if requested_width is not None and requested_width <= 0:
        raise InvalidRequestedSize(f"Requested width must be positive, got {requested_width}")
    if requested_height is not None and requested_height <= 0:
        raise InvalidRequestedSize(f"Requested height must be positive, got {requested_height}")

    native_width, native_height = native.width, native.height
    if native_width <= 0 or native_height <= 0:
        raise InvalidSourceImage(native_width, native_height)

    if requested_width is None and requested_height is None:
        return ResolvedTarget(width=native_width, height=native_height)

    if requested_width is not None and requested_height is not None:
        if not preserve_aspect_ratio:
            return _bounded(requested_width, requested_height)

        scale = min(
            Fraction(requested_width, native_width),
            Fraction(requested_height, native_height),
        )
        return _bounded(
            max(1, round_half_away(native_width * scale)),
            max(1, round_half_away(native_height * scale)),
        )

    if requested_width is not None:
        height = round_half_away(Fraction(native_height * requested_width, native_width))
        return _bounded(requested_width, max(1, height))

    assert requested_height is not None
    width = round_half_away(Fraction(native_width * requested_height, native_height))
    return _bounded(max(1, width), requested_height)
