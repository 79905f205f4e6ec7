"""Synthetic image builders for tests (Pillow only, no test media on disk)."""

from io import BytesIO

import numpy as np
from PIL import ExifTags, Image, ImageDraw


def make_image(width: int, height: int, mode: str = "RGB") -> Image.Image:
    """Grid + circle pattern so resampling has real detail to work on."""
    color: tuple[int, ...] = (73, 109, 137, 200) if mode == "RGBA" else (73, 109, 137)
    img = Image.new(mode, (width, height), color=color)
    draw = ImageDraw.Draw(img)

    step = max(1, width // 16)
    for x in range(0, width, step):
        draw.line([(x, 0), (x, height)], fill="white", width=1)
    for y in range(0, height, step):
        draw.line([(0, y), (width, y)], fill="white", width=1)
    draw.ellipse([width // 4, height // 4, 3 * width // 4, 3 * height // 4], fill="red")

    return img


def encode_image(img: Image.Image, image_format: str, **save_kwargs: object) -> bytes:
    buffer = BytesIO()
    img.save(buffer, format=image_format, **save_kwargs)
    return buffer.getvalue()


def noise_png(width: int, height: int, seed: int = 7) -> bytes:
    """Incompressible PNG, large enough to truncate mid-IDAT."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
    return encode_image(Image.fromarray(pixels, "RGB"), "PNG")


def rotated_jpeg(stored_width: int, stored_height: int, orientation: int = 6) -> bytes:
    """JPEG whose EXIF orientation tag asks viewers to rotate it."""
    exif = Image.Exif()
    exif[ExifTags.Base.Orientation] = orientation
    return encode_image(make_image(stored_width, stored_height), "JPEG", exif=exif.tobytes())


def decoded_size(data: bytes) -> tuple[int, int]:
    with Image.open(BytesIO(data)) as img:
        return img.size


def stripes(width: int, height: int, mode: str = "P") -> Image.Image:
    """1-px black/white columns; any smoothing filter turns them grey."""
    img = Image.new(mode, (width, height), 0)
    if mode == "P":
        img.putpalette([0, 0, 0, 255, 255, 255])
    white = 1 if mode == "P" else 255
    draw = ImageDraw.Draw(img)
    for x in range(1, width, 2):
        draw.line([(x, 0), (x, height - 1)], fill=white)
    return img


def mpo(width: int, height: int) -> bytes:
    """Two-frame MPO, the way phone cameras store a JPEG plus a preview."""
    primary = make_image(width, height)
    preview = primary.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
    return encode_image(primary, "MPO", save_all=True, append_images=[preview])
