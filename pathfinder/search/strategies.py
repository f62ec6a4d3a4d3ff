"""Breadth-first, depth-first and uniform-cost search over open cells."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from ..grid import Coordinate, Grid
from .base import AbstractSearchStrategy, ParentMap


class BreadthFirstSearch(AbstractSearchStrategy):
    """Level-order search; the route found has the fewest steps."""

    name = "bfs"

    def explore(self, grid: Grid, start: Coordinate, goal: Coordinate) -> ParentMap:
        queue: Deque[Coordinate] = deque([start])
        parents: ParentMap = {start: None}
        while queue:
            current = queue.popleft()
            if current == goal:
                break
            for successor in grid.successors(current):
                if successor not in parents:
                    parents[successor] = current
                    queue.append(successor)
        return parents


class DepthFirstSearch(AbstractSearchStrategy):
    """Follow one corridor to its end before backtracking.

    Any route returned is valid and simple, but it is not necessarily the
    shortest one on grids that contain loops.
    """

    name = "dfs"

    def explore(self, grid: Grid, start: Coordinate, goal: Coordinate) -> ParentMap:
        stack: List[Tuple[Coordinate, Optional[Coordinate]]] = [(start, None)]
        parents: ParentMap = {}
        while stack:
            current, parent = stack.pop()
            if current in parents:
                continue
            parents[current] = parent
            if current == goal:
                break
            for successor in reversed(grid.successors(current)):
                if successor not in parents:
                    stack.append((successor, current))
        return parents


class DijkstraSearch(AbstractSearchStrategy):
    """Uniform-cost search driven by a binary heap of tentative distances."""

    name = "dijkstra"

    def explore(self, grid: Grid, start: Coordinate, goal: Coordinate) -> ParentMap:
        distances: Dict[Coordinate, int] = {start: 0}
        tentative: ParentMap = {start: None}
        settled: ParentMap = {}
        heap: List[Tuple[int, Coordinate]] = [(0, start)]
        while heap:
            cost, current = heapq.heappop(heap)
            if current in settled or cost > distances[current]:
                continue
            settled[current] = tentative[current]
            if current == goal:
                break
            for successor in grid.successors(current):
                if successor in settled:
                    continue
                candidate = cost + self.step_cost(current, successor)
                if candidate < distances.get(successor, candidate + 1):
                    distances[successor] = candidate
                    tentative[successor] = current
                    heapq.heappush(heap, (candidate, successor))
        return settled


__all__ = ["BreadthFirstSearch", "DepthFirstSearch", "DijkstraSearch"]
