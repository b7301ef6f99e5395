"""Exception types raised by maze_search."""

from __future__ import annotations


class MazeSearchError(Exception):
    """Base error for maze loading and searching."""


class MalformedGridError(MazeSearchError, ValueError):
    """Raised when grid cells do not match the declared dimensions."""


class MazeFormatError(MazeSearchError, ValueError):
    """Raised when a maze file has bad markers or unknown characters."""


class InvalidEndpointError(MazeSearchError, ValueError):
    """Raised when the start or goal is outside the grid or on a wall."""


class EmptyFrontierError(MazeSearchError, IndexError):
    """Raised when taking a node from an empty frontier."""


__all__ = [
    "MazeSearchError",
    "MalformedGridError",
    "MazeFormatError",
    "InvalidEndpointError",
    "EmptyFrontierError",
]
