"""ASCII terminal renderer for mazes and solved paths."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from ..core.grid import Grid
from ..core.position import Position


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

# glyph, colour per cell kind
_GLYPHS = {
    "wall": ("#", "blue"),
    "free": (" ", "reset"),
    "path": ("*", "yellow"),
    "start": ("S", "green"),
    "goal": ("G", "red"),
}


class TerminalView:
    """Draws a maze grid, optionally with a path overlay."""

    def __init__(self, colour: bool = True) -> None:
        self.colour = colour

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def lines(
        self,
        grid: Grid,
        path: Iterable[Position] = (),
        start: Optional[Position] = None,
        goal: Optional[Position] = None,
    ) -> list[str]:
        """Return the rendered rows of ``grid`` as strings."""

        on_path = set(path)
        out: list[str] = []
        for y in range(grid.rows):
            row: list[str] = []
            for x in range(grid.cols):
                pos = Position(x, y)
                glyph, colour = _GLYPHS[_cell_kind(grid, pos, on_path, start, goal)]
                if self.colour:
                    row.append(f"{_COLOURS[colour]}{glyph}")
                else:
                    row.append(glyph)
            if self.colour:
                row.append(_COLOURS["reset"])
            out.append("".join(row))
        return out

    def render(
        self,
        grid: Grid,
        path: Iterable[Position] = (),
        start: Optional[Position] = None,
        goal: Optional[Position] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Write the diagram to ``stream`` (``stdout`` by default)."""

        stream = stream or sys.stdout
        stream.write("\n".join(self.lines(grid, path, start, goal)) + "\n")
        stream.flush()


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _cell_kind(
    grid: Grid,
    pos: Position,
    on_path: set[Position],
    start: Optional[Position],
    goal: Optional[Position],
) -> str:
    if pos == start:
        return "start"
    if pos == goal:
        return "goal"
    if grid.is_wall(pos):
        return "wall"
    if pos in on_path:
        return "path"
    return "free"


__all__ = ["TerminalView"]
