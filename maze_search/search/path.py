"""Path reconstruction from a terminal search node."""

from __future__ import annotations

from typing import List

from ..core.position import Position
from .node import SearchNode


def build_path(terminal: SearchNode) -> List[Position]:
    """Return positions from ``terminal`` back to the root (goal to start).

    The list is built fresh; it shares no containers with the search tree.
    """

    return [node.position for node in terminal.chain()]


__all__ = ["build_path"]
