"""Grid model shared by maze generation and pathfinding."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Set, Tuple, Union

import numpy as np

from .errors import InvalidDimensions

# Generation steps over rooms, leaving a wall cell between neighbours.
ROOM_STEPS: Tuple[Tuple[int, int], ...] = ((2, 0), (-2, 0), (0, 2), (0, -2))
# Traversal steps, in successor enumeration order: left, right, up, down.
UNIT_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

OUT_OF_BOUNDS_GLYPH = " "


class CellState(enum.IntEnum):
    OPEN = 0
    WALL = 1

    @property
    def glyph(self) -> str:
        return "#" if self is CellState.WALL else "."


@dataclass(frozen=True, order=True)
class Coordinate:
    """Immutable grid position; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinates must be non-negative, got ({self.x}, {self.y})")

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def offset(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)

    def manhattan(self, other: "Coordinate") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def coerce(cls, value: "CoordinateLike") -> "Coordinate":
        """Accept either a ``Coordinate`` or an ``(x, y)`` pair."""

        if isinstance(value, Coordinate):
            return value
        x, y = value
        return cls(int(x), int(y))


CoordinateLike = Union[Coordinate, Tuple[int, int]]


class Grid:
    """Fixed-size rectangle of wall/open cells stored row-major in numpy."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)
        self.width = int(width)
        self.height = int(height)
        self._cells = np.full((self.height, self.width), int(CellState.WALL), dtype=np.uint8)
        self._frozen = False

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from rows of ``1`` (wall) / ``0`` (open) values."""

        height = len(rows)
        width = len(rows[0]) if height else 0
        grid = cls(width, height)
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError("All rows must have the same length")
            for x, value in enumerate(row):
                grid.set(x, y, CellState(int(value)))
        return grid

    # ------------------------------------------------------------------

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def size(self) -> int:
        return self.width * self.height

    def freeze(self) -> "Grid":
        """Publish the grid as read-only; later ``set`` calls raise."""

        self._frozen = True
        self._cells.flags.writeable = False
        return self

    def copy(self) -> "Grid":
        clone = Grid(self.width, self.height)
        clone._cells[:, :] = self._cells
        return clone

    def in_bounds(self, point: CoordinateLike) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[CellState]:
        if 0 <= x < self.width and 0 <= y < self.height:
            return CellState(int(self._cells[y, x]))
        return None

    def set(self, x: int, y: int, state: CellState) -> None:
        if self._frozen:
            raise RuntimeError("Grid is frozen and can no longer be modified")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self.width}x{self.height} grid")
        self._cells[y, x] = int(CellState(state))

    def is_open(self, point: CoordinateLike) -> bool:
        x, y = point
        return self.get(x, y) is CellState.OPEN

    def open_cells(self) -> List[Coordinate]:
        ys, xs = np.nonzero(self._cells == int(CellState.OPEN))
        return [Coordinate(int(x), int(y)) for y, x in zip(ys, xs)]

    def _stepped(self, point: Coordinate, steps: Iterable[Tuple[int, int]]) -> Iterator[Coordinate]:
        for dx, dy in steps:
            nx, ny = point.x + dx, point.y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield Coordinate(nx, ny)

    def neighbors_2(self, point: CoordinateLike) -> Set[Coordinate]:
        """Rooms two cells away along an axis, used while carving."""

        return set(self._stepped(Coordinate.coerce(point), ROOM_STEPS))

    def successors(self, point: CoordinateLike) -> List[Coordinate]:
        """Open cells one step away along an axis, used while searching."""

        return [
            candidate
            for candidate in self._stepped(Coordinate.coerce(point), UNIT_STEPS)
            if self._cells[candidate.y, candidate.x] == int(CellState.OPEN)
        ]

    # ------------------------------------------------------------------

    def to_rows(self) -> List[List[int]]:
        return self._cells.astype(int).tolist()

    def render_text(self, overlay: Optional[Mapping[Coordinate, str]] = None) -> str:
        """Dump the grid as ``#``/``.`` rows; ``overlay`` replaces glyphs per cell."""

        overlay = overlay or {}
        lines: List[str] = []
        for y in range(self.height):
            chars: List[str] = []
            for x in range(self.width):
                marker = overlay.get(Coordinate(x, y))
                if marker is not None:
                    chars.append(marker)
                    continue
                state = self.get(x, y)
                chars.append(OUT_OF_BOUNDS_GLYPH if state is None else state.glyph)
            lines.append("".join(chars) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render_text()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, frozen={self._frozen})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self._cells, other._cells))
        )

    __hash__ = None  # type: ignore[assignment]


__all__ = [
    "CellState",
    "Coordinate",
    "Grid",
    "ROOM_STEPS",
    "UNIT_STEPS",
]
