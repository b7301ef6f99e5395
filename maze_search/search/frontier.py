"""Open list kept roughly ordered by estimated total cost."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator

from ..core.position import Position
from ..errors import EmptyFrontierError
from .node import SearchNode


class Frontier:
    """Double-ended open list whose front holds the next node to expand.

    New nodes go to the front. Ordering is maintained incrementally with
    :meth:`reorder_newest_entry`, which relocates only the most recently
    pushed node; the list is never globally sorted.
    """

    def __init__(self) -> None:
        self._nodes: Deque[SearchNode] = deque()

    def push_front(self, node: SearchNode) -> None:
        self._nodes.appendleft(node)

    def peek_front(self) -> SearchNode:
        if not self._nodes:
            raise EmptyFrontierError("peek on an empty frontier")
        return self._nodes[0]

    def pop_front(self) -> SearchNode:
        if not self._nodes:
            raise EmptyFrontierError("pop on an empty frontier")
        return self._nodes.popleft()

    def reorder_newest_entry(self, goal: Position) -> None:
        """Move the front node to its place by cost towards ``goal``.

        One pass of insertion sort: the node lands before the first entry
        whose cost is not lower than its own. The final entry is never
        compared, so a node that outranks none of the others ends up at
        the back.
        """

        if not self._nodes:
            return
        newest = self._nodes.popleft()
        cost = newest.cost(goal)
        for i in range(len(self._nodes) - 1):
            if cost > self._nodes[i].cost(goal):
                continue
            self._nodes.insert(i, newest)
            return
        self._nodes.append(newest)

    def clear(self) -> None:
        self._nodes.clear()

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes)


__all__ = ["Frontier"]
