"""
Module used to import occupancy grids from files

Two formats are read:
    - .json: a list of rows, or an object holding it under "grid"
    - anything else: text, one row per line, where the characters of
      constants.EMPTY_CHARS are empty cells and any other is occupied
"""

import json
import os
from typing import Any, TypeAlias

from constants import EMPTY_CHARS

BinaryGrid: TypeAlias = list[list[int]]


def path_to_grid(path: str) -> BinaryGrid:
    _, extension = os.path.splitext(path)
    with open(path, "r") as file:
        if extension.lower() == ".json":
            return json_to_grid(json.load(file))
        return text_to_grid(file.read())


def json_to_grid(data: Any) -> BinaryGrid:
    if isinstance(data, dict):
        if "grid" not in data:
            raise ValueError('A JSON grid object needs a "grid" key')
        data = data["grid"]

    if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
        raise ValueError("A JSON grid must be a list of rows")
    if not all(isinstance(cell, (int, float)) for row in data for cell in row):
        raise ValueError("JSON grid cells must be numbers or booleans")

    grid = [[1 if cell else 0 for cell in row] for row in data]
    check_rectangular(grid)
    return grid


def text_to_grid(text: str) -> BinaryGrid:
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    grid = [[0 if char in EMPTY_CHARS else 1 for char in line] for line in lines]
    check_rectangular(grid)
    return grid


def check_rectangular(grid: BinaryGrid) -> None:
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise ValueError(f"Grid rows have different lengths: {sorted(widths)}")
