"""A* expansion loop over a 4-connected maze grid."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..core.grid import Grid
from ..core.position import Direction, Position
from ..errors import InvalidEndpointError
from .frontier import Frontier
from .node import SearchNode
from .path import build_path
from .visited import ExploredSet, VisitedTracker


logger = logging.getLogger(__name__)

StepHook = Callable[[int, SearchNode], None]


class SearchOutcome(Enum):
    GOAL_FOUND = "goal_found"
    FRONTIER_EMPTY = "frontier_empty"
    ITERATION_LIMIT = "iteration_limit"


@dataclass
class SearchResult:
    """Outcome, path (goal first) and counters of one search."""

    outcome: SearchOutcome
    path: List[Position] = field(default_factory=list)
    loop_count: int = 0
    expanded_count: int = 0

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.GOAL_FOUND

    @property
    def steps(self) -> int:
        """Number of moves along ``path``; ``0`` when there is no path."""

        return max(len(self.path) - 1, 0)


class AStarEngine:
    """Run A* over ``grid`` with a front-selected, partially sorted open list.

    Each iteration looks at the frontier's front node, pushes every
    neighbour that is free and not yet reached, and re-slots only the
    newest pushed node. A node leaves the frontier once it yields no new
    neighbours, at which point its position joins the explored set.

    Parameters
    ----------
    grid:
        Maze to search. It is only read.
    max_iterations:
        Stop with :attr:`SearchOutcome.ITERATION_LIMIT` after this many
        loop iterations. ``0`` means no limit.
    log_each_step:
        Log every selected position at ``DEBUG`` level.
    on_step:
        Called with ``(loop_count, node)`` once per iteration, right after
        the current node is selected.
    """

    def __init__(
        self,
        grid: Grid,
        *,
        max_iterations: int = 0,
        log_each_step: bool = False,
        on_step: Optional[StepHook] = None,
    ) -> None:
        if max_iterations < 0:
            raise ValueError("max_iterations must not be negative")
        self.grid = grid
        self.max_iterations = max_iterations
        self.log_each_step = log_each_step
        self.on_step = on_step

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def search(self, start: Position, goal: Position) -> SearchResult:
        """Search from ``start`` to ``goal`` and return a :class:`SearchResult`.

        Raises :class:`InvalidEndpointError` if either endpoint is outside
        the grid or on a wall.
        """

        self._check_endpoint("start", start)
        self._check_endpoint("goal", goal)
        logger.info("Searching %s -> %s on %dx%d grid", start, goal, self.grid.cols, self.grid.rows)

        frontier = Frontier()
        explored = ExploredSet()
        tracker = VisitedTracker(frontier, explored)
        frontier.push_front(SearchNode(start))

        loop_count = 0
        expanded_count = 0
        outcome = SearchOutcome.FRONTIER_EMPTY
        terminal: Optional[SearchNode] = None

        try:
            while not frontier.is_empty():
                if self.max_iterations and loop_count >= self.max_iterations:
                    outcome = SearchOutcome.ITERATION_LIMIT
                    break
                loop_count += 1

                current = frontier.peek_front()
                if self.log_each_step:
                    logger.debug("[%d] at %s (depth %d)", loop_count, current.position, current.depth)
                if self.on_step is not None:
                    self.on_step(loop_count, current)

                candidates = [
                    pos
                    for pos, cost in self._neighbour_costs(current, goal)
                    if cost != math.inf and not tracker.is_known(pos)
                ]

                size_before = len(frontier)
                for pos in candidates:
                    frontier.push_front(SearchNode(pos, current))
                if len(frontier) != size_before:
                    frontier.reorder_newest_entry(goal)

                if current.position == goal:
                    outcome = SearchOutcome.GOAL_FOUND
                    terminal = current
                    break

                if not candidates:
                    frontier.pop_front()
                    expanded_count += 1
                    explored.add(current.position)

            path = build_path(terminal) if terminal is not None else []
        finally:
            frontier.clear()
            explored.clear()

        if outcome is SearchOutcome.GOAL_FOUND:
            logger.info(
                "Goal reached: %d positions, %d nodes expanded, %d loops",
                len(path),
                expanded_count,
                loop_count,
            )
        else:
            logger.warning(
                "No path to %s (%s) after %d loops, %d nodes expanded",
                goal,
                outcome.value,
                loop_count,
                expanded_count,
            )
        return SearchResult(outcome, path, loop_count, expanded_count)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _neighbour_costs(
        self, node: SearchNode, goal: Position
    ) -> List[Tuple[Position, float]]:
        """Return ``(position, f)`` for each direction; blocked moves cost ``inf``."""

        g = node.depth + 1
        out: List[Tuple[Position, float]] = []
        for direction in Direction:
            pos = node.position + direction
            if self.grid.is_passable(pos):
                out.append((pos, g + pos.dist_to(goal)))
            else:
                out.append((pos, math.inf))
        return out

    def _check_endpoint(self, label: str, pos: Position) -> None:
        if not self.grid.in_bounds(pos):
            raise InvalidEndpointError(f"{label} {pos} is outside the {self.grid.cols}x{self.grid.rows} grid")
        if self.grid.is_wall(pos):
            raise InvalidEndpointError(f"{label} {pos} is a wall cell")


def a_star(grid: Grid, start: Position, goal: Position, **options) -> SearchResult:
    """Convenience wrapper: ``AStarEngine(grid, **options).search(start, goal)``."""

    return AStarEngine(grid, **options).search(start, goal)


__all__ = ["AStarEngine", "SearchOutcome", "SearchResult", "a_star"]
