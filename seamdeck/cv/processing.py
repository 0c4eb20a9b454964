"""Seam-carving operations on images: rotation, energy, cost, seams."""

from __future__ import annotations

from typing import Sequence

from seamdeck.cv.image import Image, Pixel
from seamdeck.cv.matrix import Matrix


def rotate_left(img: Image) -> Image:
    """Return ``img`` rotated 90 degrees counterclockwise."""
    width, height = img.width, img.height
    rotated = Image(height, width)
    for row in range(height):
        for column in range(width):
            rotated[width - 1 - column, row] = img[row, column]
    return rotated


def rotate_right(img: Image) -> Image:
    """Return ``img`` rotated 90 degrees clockwise."""
    width, height = img.width, img.height
    rotated = Image(height, width)
    for row in range(height):
        for column in range(width):
            rotated[column, height - 1 - row] = img[row, column]
    return rotated


def _squared_difference(p1: Pixel, p2: Pixel) -> int:
    # Scaled down by 100 to keep the accumulated costs small.
    dr = p2.r - p1.r
    dg = p2.g - p1.g
    db = p2.b - p1.b
    return (dr * dr + dg * dg + db * db) // 100


def compute_energy_matrix(img: Image) -> Matrix:
    """Return the energy matrix of ``img``.

    Each interior element is the squared difference of its vertical neighbours
    plus that of its horizontal neighbours. Every border element is set to the
    largest energy found. The image needs at least two columns and four rows.
    """
    energy = Matrix(img.width, img.height)
    peak = _squared_difference(img[0, 1], img[2, 1]) + _squared_difference(img[1, 0], img[3, 0])
    for row in range(1, img.height - 1):
        for column in range(1, img.width - 1):
            vertical = _squared_difference(img[row - 1, column], img[row + 1, column])
            horizontal = _squared_difference(img[row, column - 1], img[row, column + 1])
            value = vertical + horizontal
            energy[row, column] = value
            peak = max(peak, value)
    energy.fill_border(peak)
    return energy


def _window(column: int, width: int) -> tuple[int, int]:
    """Columns [start, end) adjacent to ``column`` in the neighbouring row."""
    if column == 0:
        return 0, 2
    if column == width - 1:
        return width - 2, width
    return column - 1, column + 2


def compute_vertical_cost_matrix(energy: Matrix) -> Matrix:
    """Return the cumulative vertical cost matrix for ``energy``.

    The first row copies the energy; every later element adds the cheapest
    of the up to three elements above it.
    """
    width, height = energy.width, energy.height
    cost = Matrix(width, height)
    for column in range(width):
        cost[0, column] = energy[0, column]
    for row in range(1, height):
        for column in range(width):
            start, end = _window(column, width)
            cost[row, column] = energy[row, column] + cost.min_value_in_row(row - 1, start, end)
    return cost


def find_minimal_vertical_seam(cost: Matrix) -> list[int]:
    """Return the column of each row, top to bottom, along the cheapest seam.

    The seam is traced upward from the cheapest element of the bottom row,
    whose last column is not considered. Ties go to the leftmost column.
    """
    width, height = cost.width, cost.height
    seam = [cost.column_of_min_value_in_row(height - 1, 0, width - 1)]
    for row in range(height - 2, -1, -1):
        start, end = _window(seam[-1], width)
        seam.append(cost.column_of_min_value_in_row(row, start, end))
    seam.reverse()
    return seam


def remove_vertical_seam(img: Image, seam: Sequence[int]) -> Image:
    """Return a copy of ``img`` one column narrower, without ``seam[row]`` in each row."""
    if img.width < 2:
        raise ValueError(f"cannot remove a seam from an image of width {img.width}")
    if len(seam) != img.height:
        raise ValueError(f"seam has {len(seam)} entries, image has {img.height} rows")
    carved = Image(img.width - 1, img.height)
    for row, skipped in enumerate(seam):
        if not 0 <= skipped < img.width:
            raise IndexError(f"seam column {skipped} is outside an image of width {img.width}")
        kept = (column for column in range(img.width) if column != skipped)
        for target, source in enumerate(kept):
            carved[row, target] = img[row, source]
    return carved


def seam_carve_width(img: Image, new_width: int) -> Image:
    """Return ``img`` narrowed to ``new_width`` by removing minimal seams one at a time."""
    if not 0 < new_width <= img.width:
        raise ValueError(f"new width {new_width} must be in 1..{img.width}")
    result = img.copy()
    while result.width != new_width:
        energy = compute_energy_matrix(result)
        cost = compute_vertical_cost_matrix(energy)
        result = remove_vertical_seam(result, find_minimal_vertical_seam(cost))
    return result


def seam_carve_height(img: Image, new_height: int) -> Image:
    """Return ``img`` shortened to ``new_height`` by carving its rotated form."""
    if not 0 < new_height <= img.height:
        raise ValueError(f"new height {new_height} must be in 1..{img.height}")
    return rotate_right(seam_carve_width(rotate_left(img), new_height))


def seam_carve(img: Image, new_width: int, new_height: int) -> Image:
    """Return ``img`` carved to ``new_width`` and then to ``new_height``."""
    return seam_carve_height(seam_carve_width(img, new_width), new_height)