"""Read-only maze grid of free and wall cells."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Sequence, Tuple

from ..errors import MalformedGridError
from .position import Position


class Cell(Enum):
    FREE = "free"
    WALL = "wall"


class Grid:
    """Flat ``rows * cols`` cell array indexed by ``y * cols + x``."""

    def __init__(self, cells: Sequence[Cell], rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise MalformedGridError(f"grid bounds must be positive, got {rows}x{cols}")
        if len(cells) != rows * cols:
            raise MalformedGridError(
                f"expected {rows * cols} cells for a {rows}x{cols} grid, got {len(cells)}"
            )
        self._cells: Tuple[Cell, ...] = tuple(cells)
        self.rows: int = rows
        self.cols: int = cols
        self._free_count = sum(1 for c in self._cells if c is Cell.FREE)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Grid":
        """Build a grid from nested rows; all rows must share one width."""

        if not rows:
            raise MalformedGridError("grid has no rows")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise MalformedGridError(
                    f"row {y} has {len(row)} cells, expected {width}"
                )
        return cls([c for row in rows for c in row], len(rows), width)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return self._cells

    @property
    def size(self) -> Tuple[int, int]:
        """``(cols, rows)``, i.e. width then height."""

        return self.cols, self.rows

    @property
    def free_cell_count(self) -> int:
        return self._free_count

    # ------------------------------------------------------------------
    # Cell queries
    # ------------------------------------------------------------------
    def index(self, pos: Position) -> int:
        return pos.y * self.cols + pos.x

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.cols and 0 <= pos.y < self.rows

    def cell(self, pos: Position) -> Cell:
        return self._cells[self.index(pos)]

    def is_wall(self, pos: Position) -> bool:
        return self.cell(pos) is Cell.WALL

    def is_passable(self, pos: Position) -> bool:
        """Return ``True`` if ``pos`` is inside the grid and not a wall."""

        return self.in_bounds(pos) and not self.is_wall(pos)

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""

        for y in range(self.rows):
            for x in range(self.cols):
                yield Position(x, y)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"


__all__ = ["Cell", "Grid"]
