"""
Freeman directions on a 2D grid.

Directions are indexed as in Freeman chain codes, orthogonal moves first:
    0: ←  1: ↑  2: →  3: ↓  4: ↖  5: ↗  6: ↘  7: ↙

Named after chess pieces:
- TOWER: the 4 orthogonal moves
- KING: all 8 moves
"""

from typing import Final, Literal

from localtypes import Coord

Tower = Literal[0, 1, 2, 3]
Bishop = Literal[4, 5, 6, 7]
King = Tower | Bishop

TOWER: Final[list[Tower]] = [0, 1, 2, 3]
KING: Final[list[King]] = [0, 1, 2, 3, 4, 5, 6, 7]

DIRECTIONS_FREEMAN: Final[dict[King, Coord]] = {
    0: Coord(-1, 0),
    1: Coord(0, -1),
    2: Coord(1, 0),
    3: Coord(0, 1),
    4: Coord(-1, -1),
    5: Coord(1, -1),
    6: Coord(1, 1),
    7: Coord(-1, 1),
}
