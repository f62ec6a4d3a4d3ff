"""Perfect maze generator based on an iterative recursive backtracker."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, Set

from ..errors import InvalidDimensions, InvalidEndpoint, MazeError
from ..grid import CellState, Coordinate, CoordinateLike, Grid

logger = logging.getLogger(__name__)

DEFAULT_START = Coordinate(1, 1)
DEFAULT_SIZE = 21


class MazeGenerator:
    """Carve a spanning tree of rooms into a freshly allocated grid.

    Rooms sit two cells apart; the cell between two rooms is the wall that
    gets opened when the walk moves from one room to the other. Only rooms
    reachable from ``start`` by two-cell steps are carved, so callers wanting
    the usual bordered maze should start on the odd/odd lattice, e.g. ``(1, 1)``
    on a grid with odd dimensions.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random(seed)

    def default_start(self) -> Coordinate:
        return Coordinate(
            min(DEFAULT_START.x, self.width - 1),
            min(DEFAULT_START.y, self.height - 1),
        )

    def generate(self, start: Optional[CoordinateLike] = None) -> Grid:
        grid = Grid(self.width, self.height)
        origin = self.default_start() if start is None else self._checked_start(grid, start)
        self.carve(grid, origin)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Generated %dx%d maze from %s with %d open cells",
                self.width,
                self.height,
                tuple(origin),
                len(grid.open_cells()),
            )
        return grid.freeze()

    def carve(self, grid: Grid, start: Coordinate) -> None:
        grid.set(start.x, start.y, CellState.OPEN)
        stack: List[Coordinate] = [start]
        visited: Set[Coordinate] = {start}

        while stack:
            current = stack[-1]
            candidates = sorted(n for n in grid.neighbors_2(current) if n not in visited)
            if not candidates:
                stack.pop()
                continue
            chosen = self._rng.choice(candidates)
            grid.set((current.x + chosen.x) // 2, (current.y + chosen.y) // 2, CellState.OPEN)
            grid.set(chosen.x, chosen.y, CellState.OPEN)
            visited.add(chosen)
            stack.append(chosen)

    @staticmethod
    def _checked_start(grid: Grid, start: CoordinateLike) -> Coordinate:
        x, y = start
        if not grid.in_bounds((x, y)):
            raise InvalidEndpoint((x, y), "start", f"is outside a {grid.width}x{grid.height} grid")
        return Coordinate(int(x), int(y))


def generate_maze(
    width: int,
    height: int,
    start: CoordinateLike = DEFAULT_START,
    rng_seed: Optional[int] = None,
) -> Grid:
    """Build and fully carve a ``width`` x ``height`` maze.

    The returned grid is frozen. Equal arguments with the same ``rng_seed``
    always produce equal grids.
    """

    return MazeGenerator(width, height, seed=rng_seed).generate(start)


def generate_square_maze(size: int, rng_seed: Optional[int] = None) -> Grid:
    return generate_maze(size, size, DEFAULT_START, rng_seed=rng_seed)


__all__ = [
    "DEFAULT_START",
    "MazeGenerator",
    "generate_maze",
    "generate_square_maze",
]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze and print it as text")
    parser.add_argument("width", type=int, nargs="?", default=DEFAULT_SIZE, help="Grid width in cells")
    parser.add_argument("height", type=int, nargs="?", default=None, help="Grid height (defaults to width)")
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    height = args.height if args.height is not None else args.width
    try:
        grid = MazeGenerator(args.width, height, seed=args.seed).generate(args.start)
    except MazeError as exc:
        logger.error("%s", exc)
        return 1
    sys.stdout.write(grid.render_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
