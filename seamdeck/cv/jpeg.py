"""Reading and writing JPEG files as images."""

from __future__ import annotations

import os

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from seamdeck.cv.image import Image, Pixel

QUALITY_HIGH = 95
QUALITY_LOW = 30
_MASK = (1 << 8) - 1


def has_jpeg_extension(filename: str) -> bool:
    """Whether ``filename`` ends with .jpg or .jpeg, ignoring case."""
    extension = filename.rpartition(".")[2].lower()
    return extension in ("jpg", "jpeg")


def read_jpeg(filename: str | os.PathLike[str]) -> Image:
    """Read a JPEG file into an image; grayscale values fill all three channels."""
    try:
        source = PILImage.open(filename)
    except UnidentifiedImageError:
        raise ValueError(f"Failed to read jpeg header from {filename}") from None
    with source:
        if source.format != "JPEG":
            raise ValueError(f"{filename} is not a JPEG file")
        rgb = source.convert("RGB")
    width, height = rgb.size
    image = Image(width, height)
    values = iter(rgb.tobytes())
    for index, (r, g, b) in enumerate(zip(values, values, values)):
        image[divmod(index, width)] = Pixel(r, g, b)
    return image


def write_jpeg(
    image: Image, filename: str | os.PathLike[str], high_quality: bool = False
) -> None:
    """Write ``image`` as a JPEG file.

    Colour values are truncated to 8 bits. High quality uses a higher
    compression quality and no chrominance subsampling.
    """
    raw = bytes(
        value & _MASK
        for row in range(image.height)
        for column in range(image.width)
        for value in image[row, column]
    )
    picture = PILImage.frombytes("RGB", (image.width, image.height), raw)
    options: dict[str, int] = {"quality": QUALITY_HIGH if high_quality else QUALITY_LOW}
    if high_quality:
        options["subsampling"] = 0
    picture.save(filename, "JPEG", **options)