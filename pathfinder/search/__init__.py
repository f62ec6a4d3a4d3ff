"""Search strategies and the pathfinding entry point."""

__all__ = [
    "AbstractSearchStrategy",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DijkstraSearch",
    "Algorithm",
    "Path",
    "find_path",
]

from .base import AbstractSearchStrategy
from .strategies import BreadthFirstSearch, DepthFirstSearch, DijkstraSearch
from .pathfinder import Algorithm, Path, find_path
