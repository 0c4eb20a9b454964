"""Command that shrinks a PPM image by seam carving."""

from __future__ import annotations

import sys
from typing import Sequence

from seamdeck.cv.image import Image
from seamdeck.cv.processing import seam_carve

USAGE = (
    "Usage: resize IN_FILENAME OUT_FILENAME WIDTH [HEIGHT]\n"
    "WIDTH and HEIGHT must be less than or equal to original"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Carve the input image to WIDTH (and HEIGHT) and write it as PPM."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (3, 4):
        print(USAGE)
        return 1
    in_name, out_name = args[0], args[1]

    try:
        with open(in_name, encoding="ascii") as source:
            img = Image.read(source)
    except OSError:
        print(f"Error opening file: {in_name}")
        return 1

    try:
        target = open(out_name, "w", encoding="ascii")
    except OSError:
        print(f"Error opening file: {out_name}")
        return 1

    with target:
        try:
            width = int(args[2])
            height = int(args[3]) if len(args) == 4 else img.height
        except ValueError:
            print(USAGE)
            return 1
        if not (0 < width <= img.width and 0 < height <= img.height):
            print(USAGE)
            return 1
        seam_carve(img, width, height).write(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())