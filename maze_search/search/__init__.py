"""search package."""

from .astar import AStarEngine, SearchOutcome, SearchResult, a_star
from .frontier import Frontier
from .node import SearchNode
from .path import build_path
from .visited import ExploredSet, VisitedTracker

__all__ = [
    "AStarEngine",
    "SearchOutcome",
    "SearchResult",
    "a_star",
    "Frontier",
    "SearchNode",
    "build_path",
    "ExploredSet",
    "VisitedTracker",
]
