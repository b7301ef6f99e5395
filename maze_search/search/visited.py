"""Duplicate detection for the expansion loop."""

from __future__ import annotations

from typing import Iterator, List, Set

from ..core.position import Position
from .frontier import Frontier


class ExploredSet:
    """Positions whose neighbours have all been generated, in expansion order."""

    def __init__(self) -> None:
        self._order: List[Position] = []
        self._members: Set[Position] = set()

    def add(self, pos: Position) -> None:
        if pos not in self._members:
            self._members.add(pos)
            self._order.append(pos)

    def clear(self) -> None:
        self._order.clear()
        self._members.clear()

    def __contains__(self, pos: object) -> bool:
        return pos in self._members

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._order)


class VisitedTracker:
    """Answer whether a position has already been reached.

    A position counts as reached when it lies on the ancestor chain of any
    node still in the frontier, or when it has been fully expanded. The
    chain walk costs ``O(len(frontier) * depth)`` per query and decides
    which duplicate survives under cost ties, so it is kept instead of a
    position-to-node map.
    """

    def __init__(self, frontier: Frontier, explored: ExploredSet) -> None:
        self._frontier = frontier
        self._explored = explored

    def is_reached_by_frontier(self, pos: Position) -> bool:
        return any(node.has_in_chain(pos) for node in self._frontier)

    def is_expanded(self, pos: Position) -> bool:
        return pos in self._explored

    def is_known(self, pos: Position) -> bool:
        """Return ``True`` if ``pos`` must not get a new node."""

        return self.is_reached_by_frontier(pos) or self.is_expanded(pos)


__all__ = ["ExploredSet", "VisitedTracker"]
