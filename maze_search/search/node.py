"""Search tree nodes linked to their parent."""

from __future__ import annotations

from typing import Iterator, Optional

from ..core.position import Position


class SearchNode:
    """A position reached during search, with a back-link to its parent.

    ``depth`` is the number of moves from the start and doubles as the
    path cost ``g``. The parent link only points upward, so the node graph
    is a tree and nodes are freed as soon as nothing references them.
    """

    __slots__ = ("position", "parent", "depth")

    def __init__(self, position: Position, parent: Optional["SearchNode"] = None) -> None:
        self.position = position
        self.parent = parent
        self.depth: int = 0 if parent is None else parent.depth + 1

    def cost(self, goal: Position) -> float:
        """Return ``f = g + h`` with a Euclidean ``h`` towards ``goal``."""

        return self.depth + self.position.dist_to(goal)

    def chain(self) -> Iterator["SearchNode"]:
        """Yield this node followed by each ancestor up to the root."""

        node: Optional[SearchNode] = self
        while node is not None:
            yield node
            node = node.parent

    def has_in_chain(self, pos: Position) -> bool:
        """Return ``True`` if this node or any ancestor sits on ``pos``."""

        return any(n.position == pos for n in self.chain())

    def __repr__(self) -> str:
        return f"SearchNode({self.position}, depth={self.depth})"


__all__ = ["SearchNode"]
