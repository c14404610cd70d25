"""
Rectangles are the bounding boxes of connected components on a 2D grid.

Rectangles are parametrized from their top-left corner: (col, row, width, height).
Their right and bottom edges are exclusive, so a single cell at (col, row)
is the rectangle (col, row, 1, 1).
"""

from collections.abc import Iterable, Iterator
from functools import reduce
from typing import NamedTuple

from localtypes import Box, Coord


class Rectangle(NamedTuple):
    """
    Axis-aligned rectangle in (col, row) coordinates.

    col, row are the X, Y of the top-left corner.
    Compares equal to the plain tuple (col, row, width, height).
    """

    col: int
    row: int
    width: int
    height: int

    @classmethod
    def from_edges(cls, left: int, right: int, top: int, bottom: int) -> "Rectangle":
        """Build from the left/top edges (inclusive) and right/bottom edges (exclusive)."""
        if right < left:
            raise ValueError(f"Negative width: right {right} < left {left}")
        if bottom < top:
            raise ValueError(f"Negative height: bottom {bottom} < top {top}")
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def at(cls, coord: Coord) -> "Rectangle":
        """The 1x1 rectangle covering a single cell."""
        col, row = coord
        return cls(col, row, 1, 1)

    @property
    def right(self) -> int:
        return self.col + self.width

    @property
    def bottom(self) -> int:
        return self.row + self.height

    @property
    def top_left(self) -> Coord:
        return Coord(self.col, self.row)

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, coord: Coord) -> bool:
        col, row = coord
        return self.col <= col < self.right and self.row <= row < self.bottom

    def extend(self, coord: Coord) -> "Rectangle":
        """Returns the smallest rectangle covering both this one and the cell."""
        col, row = coord
        return Rectangle.from_edges(
            min(col, self.col),
            max(col + 1, self.right),
            min(row, self.row),
            max(row + 1, self.bottom),
        )


def box_to_rectangle(box: Box) -> Rectangle:
    (col_min, row_min), (col_max, row_max) = box
    width, height = col_max - col_min + 1, row_max - row_min + 1
    return Rectangle(col_min, row_min, width, height)


def rectangle_to_box(rect: Rectangle) -> Box:
    col_min, row_min, width, height = rect
    col_max, row_max = col_min + width - 1, row_min + height - 1
    return (Coord(col_min, row_min), Coord(col_max, row_max))


def iter_rect(rect: Rectangle) -> Iterator[Coord]:
    """Cells of the rectangle, in raster order"""
    col_min, row_min, width, height = rect
    return (
        Coord(col_min + dcol, row_min + drow)
        for drow in range(height)
        for dcol in range(width)
    )


def coords_to_rectangle(coords: Iterable[Coord]) -> Rectangle:
    """
    Minimal rectangle containing all the coordinates.

    Raises:
        ValueError: if no coordinates are given, as there is no empty rectangle
        to start from.
    """
    coords_iter = iter(coords)
    first = next(coords_iter, None)
    if first is None:
        raise ValueError("Cannot bound an empty set of coordinates")
    return reduce(Rectangle.extend, coords_iter, Rectangle.at(first))
