"""
Decompose a grid file into the bounding rectangles of its objects.

Prints one "col row width height" line per rectangle, in raster order of
the objects' topmost-leftmost cell, after a rendering of the grid.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from constants import DEFAULT_CONNECTIVITY, DEFAULT_TRAVERSAL
from decomposition import Connectivity, TraversalModes, grid_to_rectangles
from utils.display import display_decomposition, display_rectangles
from utils.grid import grid_to_proportions
from utils.loader import path_to_grid

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Decompose an occupancy grid into one bounding rectangle per object"
    )
    parser.add_argument("grid", help="Grid file: .json list of rows, or text")
    parser.add_argument(
        "--connectivity",
        choices=[c.value for c in Connectivity],
        default=DEFAULT_CONNECTIVITY,
        help="tower: 4-connectivity, king: 8-connectivity",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in TraversalModes],
        default=DEFAULT_TRAVERSAL,
        help="Flood fill traversal order",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-visuals", action="store_true", help="Disable visual output"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        grid = path_to_grid(args.grid)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load grid {args.grid}: {e}")
        return 1

    width, height = grid_to_proportions(grid)
    logger.info(f"Loaded {width}x{height} grid from {args.grid}")

    rectangles = grid_to_rectangles(
        grid, connectivity=args.connectivity, mode=args.mode
    )
    logger.info(f"Found {len(rectangles)} objects ({args.connectivity} connectivity)")

    if not args.no_visuals:
        display_decomposition(grid, rectangles)
    display_rectangles(rectangles)
    return 0


if __name__ == "__main__":
    sys.exit(main())
