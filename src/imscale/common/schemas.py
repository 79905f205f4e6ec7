"""Pydantic schemas shared by the resize core and the HTTP layer."""

from typing import Annotated, ClassVar, Final, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidRequestedSize, InvalidSourceImage

# Pillow stores raster sizes as C ints.
MAX_DIMENSION: Final[int] = 2**31 - 1

RequestedSide = Annotated[int, Field(gt=0, le=MAX_DIMENSION)]

# ─────────────────────────────────────────────────────────────
# Dimensions
# ─────────────────────────────────────────────────────────────


class ImageDimensions(BaseModel):
    """Immutable (width, height) pair, both strictly positive."""

    width: int = Field(..., gt=0, description="Width in pixels")
    height: int = Field(..., gt=0, description="Height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def of(cls, width: int, height: int) -> Self:
        """Build dimensions for a decoded image, rejecting degenerate sizes."""
        if width <= 0 or height <= 0:
            raise InvalidSourceImage(width, height)
        return cls(width=width, height=height)

    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height


# The resolver output has the same shape and invariants as ImageDimensions.
ResolvedTarget = ImageDimensions


# ─────────────────────────────────────────────────────────────
# Resize request
# ─────────────────────────────────────────────────────────────


class ResizeRequest(BaseModel):
    """Validated resize parameters.

    Attributes:
        width: Requested output width (None = derive from height / native)
        height: Requested output height (None = derive from width / native)
        preserve_aspect_ratio: Fit inside the width x height box instead of
            stretching to it. Only meaningful when both sides are given.
    """

    width: RequestedSide | None = None
    height: RequestedSide | None = None
    preserve_aspect_ratio: bool = False

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_query(
        cls,
        width: str | None = None,
        height: str | None = None,
        preserve_aspect_ratio: str | None = None,
    ) -> Self:
        """Parse raw query-string values.

        Raises:
            InvalidRequestedSize: If any value is malformed, zero, negative
                or above MAX_DIMENSION
        """
        raw: dict[str, str] = {}
        if width is not None:
            raw["width"] = width
        if height is not None:
            raw["height"] = height
        if preserve_aspect_ratio is not None:
            raw["preserve_aspect_ratio"] = preserve_aspect_ratio

        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            raise InvalidRequestedSize(f"Invalid resize parameters: {fields}") from exc
