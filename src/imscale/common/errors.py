"""Error taxonomy for the resize core and the image directory."""


class ImscaleError(Exception):
    """Base class for all imscale errors."""


# ─────────────────────────────────────────────────────────────
# Dimension resolution
# ─────────────────────────────────────────────────────────────


class DimensionError(ImscaleError):
    """Raised when output dimensions cannot be resolved."""


class InvalidRequestedSize(DimensionError):
    """Requested width/height is zero, negative or malformed."""

    def __init__(self, message: str = "Requested width and height must be positive integers"):
        self.message: str = message
        super().__init__(message)


class InvalidSourceImage(DimensionError):
    """Source image reports a degenerate (zero or negative) native size."""

    def __init__(self, width: int, height: int):
        self.width: int = width
        self.height: int = height
        super().__init__(f"Source image has invalid dimensions {width}x{height}")


# ─────────────────────────────────────────────────────────────
# Resize pipeline
# ─────────────────────────────────────────────────────────────


class PipelineError(ImscaleError):
    """Raised when decoding or encoding an image fails."""


class DecodeFailed(PipelineError):
    def __init__(self, reason: str):
        self.reason: str = reason
        super().__init__(f"Failed to decode image: {reason}")


class EncodeFailed(PipelineError):
    def __init__(self, image_format: str, reason: str):
        self.image_format: str = image_format
        self.reason: str = reason
        super().__init__(f"Failed to encode image as {image_format}: {reason}")


# ─────────────────────────────────────────────────────────────
# Image directory
# ─────────────────────────────────────────────────────────────


class StorageError(ImscaleError):
    """Base class for image directory errors."""


class ForbiddenPath(StorageError):
    def __init__(self, path: str):
        self.path: str = path
        super().__init__(f"Forbidden path: {path}")


class ImageNotFound(StorageError):
    def __init__(self, path: str):
        self.path: str = path
        super().__init__(f"Not found: {path}")
