"""Shared skeleton for the grid search strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..errors import NoPathFound
from ..grid import Coordinate, Grid

logger = logging.getLogger(__name__)

ParentMap = Dict[Coordinate, Optional[Coordinate]]


class AbstractSearchStrategy(ABC):
    """Base class for strategies that walk ``Grid.successors`` from a start cell.

    Subclasses only decide the frontier discipline in ``explore``; this class
    turns the resulting parent links into a start-to-goal route. Strategies
    keep no state between calls, so one instance may serve concurrent searches
    over the same frozen grid.
    """

    name: str = "abstract"

    def search(self, grid: Grid, start: Coordinate, goal: Coordinate) -> List[Coordinate]:
        parents = self.explore(grid, start, goal)
        logger.debug("%s reached %d cells searching %s -> %s", self.name, len(parents), tuple(start), tuple(goal))
        if goal not in parents:
            raise NoPathFound(start, goal)
        return self.reconstruct(parents, goal)

    @abstractmethod
    def explore(self, grid: Grid, start: Coordinate, goal: Coordinate) -> ParentMap:
        """Return parent links for every settled cell, stopping once ``goal`` settles."""

    def step_cost(self, source: Coordinate, target: Coordinate) -> int:
        return 1

    @staticmethod
    def reconstruct(parents: ParentMap, goal: Coordinate) -> List[Coordinate]:
        node: Optional[Coordinate] = goal
        result: List[Coordinate] = []
        while node is not None:
            result.append(node)
            node = parents[node]
        result.reverse()
        return result


__all__ = ["AbstractSearchStrategy", "ParentMap"]
