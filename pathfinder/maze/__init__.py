"""Maze generation package."""

__all__ = [
    "MazeGenerator",
    "generate_maze",
    "generate_square_maze",
]

from .generator import MazeGenerator, generate_maze, generate_square_maze
