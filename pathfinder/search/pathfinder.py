"""Pathfinding entry point dispatching to the available search strategies."""

from __future__ import annotations

import argparse
import enum
import json
import logging
import sys
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..errors import InvalidEndpoint, MazeError
from ..grid import CellState, Coordinate, CoordinateLike, Grid
from ..maze.generator import DEFAULT_START, generate_square_maze
from .base import AbstractSearchStrategy
from .strategies import BreadthFirstSearch, DepthFirstSearch, DijkstraSearch

logger = logging.getLogger(__name__)

PATH_GLYPH = "o"


class Algorithm(str, enum.Enum):
    BFS = "bfs"
    DFS = "dfs"
    DIJKSTRA = "dijkstra"

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        if isinstance(value, Algorithm):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown algorithm '{value}', expected one of: {choices}") from exc


STRATEGIES: Dict[Algorithm, AbstractSearchStrategy] = {
    Algorithm.BFS: BreadthFirstSearch(),
    Algorithm.DFS: DepthFirstSearch(),
    Algorithm.DIJKSTRA: DijkstraSearch(),
}


@dataclass(frozen=True)
class Path:
    steps: Tuple[Coordinate, ...]
    algorithm: Algorithm = Algorithm.BFS

    @property
    def start(self) -> Coordinate:
        return self.steps[0]

    @property
    def goal(self) -> Coordinate:
        return self.steps[-1]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.steps)

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm.value,
            "length": len(self.steps),
            "steps": [list(step) for step in self.steps],
        }


def _resolve_endpoint(grid: Grid, point: CoordinateLike, role: str) -> Coordinate:
    x, y = point
    state = grid.get(x, y)
    if state is None:
        raise InvalidEndpoint((x, y), role, f"is outside a {grid.width}x{grid.height} grid")
    if state is not CellState.OPEN:
        raise InvalidEndpoint((x, y), role, "is a wall")
    return Coordinate(int(x), int(y))


def find_path(
    grid: Grid,
    start: CoordinateLike,
    goal: CoordinateLike,
    algorithm: Union[Algorithm, str] = Algorithm.BFS,
) -> Path:
    """Return a route of open cells from ``start`` to ``goal``.

    Raises ``InvalidEndpoint`` when either endpoint is not an open cell and
    ``NoPathFound`` when the two cells are not connected. The grid is only
    read, never modified.
    """

    selected = Algorithm.parse(algorithm)
    origin = _resolve_endpoint(grid, start, "start")
    target = _resolve_endpoint(grid, goal, "goal")
    steps = STRATEGIES[selected].search(grid, origin, target)
    logger.debug("%s path %s -> %s has %d steps", selected.value, tuple(origin), tuple(target), len(steps))
    return Path(steps=tuple(steps), algorithm=selected)


__all__ = ["Algorithm", "Path", "STRATEGIES", "find_path"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze and solve it between two open cells")
    parser.add_argument("size", type=int, help="Width and height of the square maze")
    parser.add_argument(
        "--algorithm",
        type=str,
        default=Algorithm.BFS.value,
        choices=[member.value for member in Algorithm],
    )
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--goal", type=int, nargs=2, metavar=("X", "Y"), default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)


def _far_corner(size: int) -> Tuple[int, int]:
    # Largest odd coordinate, the last room carved from (1, 1).
    corner = max(size - 1 if size % 2 == 0 else size - 2, 1)
    return corner, corner


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    start = tuple(args.start) if args.start else tuple(DEFAULT_START)
    goal = tuple(args.goal) if args.goal else _far_corner(args.size)
    try:
        grid = generate_square_maze(args.size, rng_seed=args.seed)
        path = find_path(grid, start, goal, args.algorithm)
    except MazeError as exc:
        logger.error("%s", exc)
        return 1
    overlay = {step: PATH_GLYPH for step in path}
    sys.stdout.write(grid.render_text(overlay))
    print(json.dumps(path.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
