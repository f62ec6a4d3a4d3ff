"""Exceptions raised by maze construction and pathfinding."""

from __future__ import annotations

from typing import Any, Optional


class MazeError(Exception):
    """Base class for every error raised by the maze core."""


class InvalidDimensions(MazeError, ValueError):
    """A grid was requested with a zero (or negative) width or height."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Grid dimensions must be positive, got {width}x{height}")


class InvalidEndpoint(MazeError, ValueError):
    """A start or goal coordinate is out of bounds or not an open cell."""

    def __init__(self, point: Any, role: str = "endpoint", reason: Optional[str] = None) -> None:
        self.point = point
        self.role = role
        detail = reason or "is not an open cell"
        super().__init__(f"{role.capitalize()} {tuple(point)} {detail}")


class NoPathFound(MazeError, LookupError):
    """No route of open cells connects the start and the goal."""

    def __init__(self, start: Any, goal: Any) -> None:
        self.start = start
        self.goal = goal
        super().__init__(f"No path from {tuple(start)} to {tuple(goal)}")


__all__ = ["MazeError", "InvalidDimensions", "InvalidEndpoint", "NoPathFound"]
