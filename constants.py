"""
Global constants used throughout the project
"""

from typing import Final

# Connectivity used when none is given, by name: "tower" (4) or "king" (8)
DEFAULT_CONNECTIVITY: Final[str] = "tower"

# Traversal order of the flood fill: "bfs" or "dfs"
DEFAULT_TRAVERSAL: Final[str] = "bfs"

# Predicate grids covering at least this many cells track visited cells
# in a hash set instead of a bitmap
SPARSE_VISITED_MIN_AREA: Final[int] = 1 << 24

# Characters read as empty cells in text grid files
EMPTY_CHARS: Final[frozenset[str]] = frozenset({".", "0", "_", " "})

# Taken from the arcprize website. Index 0 is the empty cell,
# components cycle through 1-9
COLORS: Final[dict[int, tuple[int, int, int]]] = {
    -1: (85, 85, 85),  # Grey (#555555) Custom value for the frame
    0: (0, 0, 0),  # Black (#000000)
    1: (30, 147, 255),  # Blue (#1E93FF)
    2: (249, 60, 49),  # Red (#F93C31)
    3: (79, 204, 48),  # Green (#4FCC30)
    4: (255, 220, 0),  # Yellow (#FFDC00)
    5: (153, 153, 153),  # Gray light (#999999)
    6: (229, 58, 163),  # Magenta (#E53AA3)
    7: (255, 133, 27),  # Orange (#FF851B)
    8: (135, 216, 241),  # Blue light (#87D8F1)
    9: (146, 18, 49),  # Maroon (#921231)
}
