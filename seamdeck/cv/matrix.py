"""A rectangular grid of integers, stored row by row."""

from __future__ import annotations

from typing import Iterator, TextIO


class Matrix:
    """Grid of integers with a fixed width and height, initially all zero.

    Elements are addressed as ``matrix[row, column]``.
    """

    __slots__ = ("width", "height", "_data")

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"matrix dimensions must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._data = [0] * (width * height)

    def _offset(self, key: tuple[int, int]) -> int:
        try:
            row, column = key
        except (TypeError, ValueError):
            raise TypeError("matrix index must be a (row, column) pair") from None
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(
                f"position ({row}, {column}) is outside a {self.width}x{self.height} matrix"
            )
        return row * self.width + column

    def _rows(self) -> Iterator[list[int]]:
        for start in range(0, len(self._data), self.width or 1):
            yield self._data[start:start + self.width]

    def __getitem__(self, key: tuple[int, int]) -> int:
        return self._data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        self._data[self._offset(key)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return f"Matrix(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        """Width and height on one line, then one line per row.

        Every element is followed by a space, so each row ends with one.
        """
        lines = [f"{self.width} {self.height}"]
        if self.height:
            lines.extend("".join(f"{value} " for value in row) for row in self._rows())
        return "\n".join(lines) + "\n"

    def write(self, stream: TextIO) -> None:
        """Write the textual form of the matrix to ``stream``."""
        stream.write(str(self))

    def fill(self, value: int) -> None:
        """Set every element to ``value``."""
        self._data = [value] * (self.width * self.height)

    def fill_border(self, value: int) -> None:
        """Set every element in the first/last row or first/last column."""
        last_row, last_column = self.height - 1, self.width - 1
        for row in range(self.height):
            if row in (0, last_row):
                for column in range(self.width):
                    self[row, column] = value
            elif self.width:
                self[row, 0] = value
                self[row, last_column] = value

    def max(self) -> int:
        """Return the largest element."""
        if not self._data:
            raise ValueError("an empty matrix has no maximum")
        return max(self._data)

    def _check_row_range(self, row: int, column_start: int, column_end: int) -> int:
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} is outside a matrix of height {self.height}")
        if not (0 <= column_start and column_end <= self.width):
            raise IndexError(
                f"columns [{column_start}, {column_end}) exceed a matrix of width {self.width}"
            )
        if column_start >= column_end:
            raise ValueError(f"empty column range [{column_start}, {column_end})")
        return row * self.width

    def column_of_min_value_in_row(self, row: int, column_start: int, column_end: int) -> int:
        """Return the leftmost column in [column_start, column_end) holding the row's minimum."""
        base = self._check_row_range(row, column_start, column_end)
        return min(range(column_start, column_end), key=lambda column: self._data[base + column])

    def min_value_in_row(self, row: int, column_start: int, column_end: int) -> int:
        """Return the smallest value of ``row`` in [column_start, column_end)."""
        return self[row, self.column_of_min_value_in_row(row, column_start, column_end)]