"""
Grid Processing helpers

Grids are indexed grid[row][col] -> value, colored grids hold indices of
constants.COLORS.
"""

from typing import TypeAlias

from constants import COLORS
from localtypes import Grid, Proportions
from utils.io.tui import RESET, background

ColorGrid: TypeAlias = list[list[int]]


# helpers
def matrix_to_proportions(matrix: Grid) -> Proportions:
    height = len(matrix)
    width = len(matrix[0]) if height else 0
    return Proportions(width, height)


# Grid Base Operations
class GridOperations:
    """Basic grid operations and constructors"""

    # Constructors
    @staticmethod
    def zeros(height: int, width: int) -> ColorGrid:
        return [[0 for _ in range(width)] for _ in range(height)]

    # Operations
    @staticmethod
    def proportions(grid: Grid) -> Proportions:
        return matrix_to_proportions(grid)

    @staticmethod
    def print(grid: ColorGrid):
        width, height = GridOperations.proportions(grid)
        frame = background(COLORS, -1)

        print(f"{frame}   " * (width + 2), RESET)

        for row in range(height):
            print(f"{frame}   ", end="")
            for col in range(width):
                print(f"{background(COLORS, grid[row][col])}   ", end="")
            print(f"{frame}   ", RESET)

        print(f"{frame}   " * (width + 2), RESET)


# Constructors as Functors

## Grid <> Proportions
grid_to_proportions = GridOperations.proportions
