from collections.abc import Sequence

from localtypes import Grid
from rectangles import Rectangle, iter_rect
from utils.grid import ColorGrid, GridOperations

# Palette indices, see constants.COLORS
EMPTY_IN_RECTANGLE = 5
OBJECT_COLORS = (1, 2, 3, 4, 6, 7, 8, 9)


def decomposition_to_grid(grid: Grid, rectangles: Sequence[Rectangle]) -> ColorGrid:
    """
    Color grid of a decomposition: the occupied cells of each rectangle get
    the rectangle's color, empty cells lying within a rectangle a light gray.

    Where rectangles overlap, the earliest one wins.
    """
    width, height = GridOperations.proportions(grid)
    colored = GridOperations.zeros(height, width)

    for i, rect in reversed(list(enumerate(rectangles))):
        color = OBJECT_COLORS[i % len(OBJECT_COLORS)]
        for col, row in iter_rect(rect):
            colored[row][col] = color if grid[row][col] else EMPTY_IN_RECTANGLE

    return colored


def display_decomposition(grid: Grid, rectangles: Sequence[Rectangle]):
    GridOperations.print(decomposition_to_grid(grid, rectangles))


def display_rectangles(rectangles: Sequence[Rectangle]):
    for col, row, width, height in rectangles:
        print(f"{col} {row} {width} {height}")
