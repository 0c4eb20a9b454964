"""RGB images with plain-text PPM (P3) reading and writing."""

from __future__ import annotations

from typing import NamedTuple, TextIO

MAX_INTENSITY = 255


class Pixel(NamedTuple):
    """An RGB colour."""

    r: int
    g: int
    b: int


_BLACK = Pixel(0, 0, 0)


class Image:
    """A grid of pixels addressed as ``image[row, column]``, initially black."""

    __slots__ = ("width", "height", "_pixels")

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image dimensions must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [_BLACK] * (width * height)

    @classmethod
    def read(cls, stream: TextIO) -> Image:
        """Read an image in PPM P3 format without comments.

        Any whitespace may separate the values. Pixels are filled row by row;
        trailing values that do not make up a whole pixel are ignored.
        """
        tokens = stream.read().split()
        if len(tokens) < 4:
            raise ValueError("incomplete PPM header")
        try:
            width, height = int(tokens[1]), int(tokens[2])
            values = [int(token) for token in tokens[4:]]
        except ValueError as exc:
            raise ValueError(f"malformed PPM data: {exc}") from None
        image = cls(width, height)
        stream_values = iter(values)
        pixels = [Pixel(*triple) for triple in zip(stream_values, stream_values, stream_values)]
        if len(pixels) > width * height:
            raise ValueError(
                f"PPM data holds {len(pixels)} pixels, more than {width}x{height}"
            )
        image._pixels[: len(pixels)] = pixels
        return image

    def _offset(self, key: tuple[int, int]) -> int:
        try:
            row, column = key
        except (TypeError, ValueError):
            raise TypeError("image index must be a (row, column) pair") from None
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(
                f"position ({row}, {column}) is outside a {self.width}x{self.height} image"
            )
        return row * self.width + column

    def __getitem__(self, key: tuple[int, int]) -> Pixel:
        return self._pixels[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], color: Pixel | tuple[int, int, int]) -> None:
        self._pixels[self._offset(key)] = Pixel(*color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._pixels == other._pixels
        )

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        """The image in PPM P3 format, one row per line, each value followed by a space."""
        header = f"P3\n{self.width} {self.height}\n{MAX_INTENSITY}\n"
        if not self.width:
            return header + "\n" * self.height
        rows = (
            "".join(f"{p.r} {p.g} {p.b} " for p in self._pixels[start:start + self.width]) + "\n"
            for start in range(0, len(self._pixels), self.width)
        )
        return header + "".join(rows)

    def write(self, stream: TextIO) -> None:
        """Write the image to ``stream`` in PPM P3 format."""
        stream.write(str(self))

    def fill(self, color: Pixel | tuple[int, int, int]) -> None:
        """Set every pixel to ``color``."""
        self._pixels = [Pixel(*color)] * (self.width * self.height)

    def copy(self) -> Image:
        """Return an independent copy of the image."""
        duplicate = Image(self.width, self.height)
        duplicate._pixels = list(self._pixels)
        return duplicate