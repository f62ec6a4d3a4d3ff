"""Perfect maze generation and grid pathfinding toolkit."""

__all__ = [
    "CellState",
    "Coordinate",
    "Grid",
    "MazeGenerator",
    "generate_maze",
    "generate_square_maze",
    "Algorithm",
    "Path",
    "find_path",
    "MazeError",
    "InvalidDimensions",
    "InvalidEndpoint",
    "NoPathFound",
]

from .errors import MazeError, InvalidDimensions, InvalidEndpoint, NoPathFound
from .grid import CellState, Coordinate, Grid
from .maze import MazeGenerator, generate_maze, generate_square_maze
from .search import Algorithm, Path, find_path
