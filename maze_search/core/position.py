"""Grid coordinates and the four cardinal move directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """Immutable 2D integer coordinate."""

    x: int
    y: int

    def __add__(self, other: "Position | Direction") -> "Position":
        if isinstance(other, Direction):
            other = other.offset
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def dist_to(self, other: "Position") -> float:
        """Return the Euclidean distance to ``other``."""

        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def manhattan_to(self, other: "Position") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Direction(Enum):
    """Unit moves on a 4-connected grid, in neighbour generation order."""

    UP = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def offset(self) -> Position:
        dx, dy = self.value
        return Position(dx, dy)


__all__ = ["Position", "Direction"]
