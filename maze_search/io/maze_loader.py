"""Load text maze files into a :class:`Grid` with start and goal."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import CONFIG, MazeConfig
from ..core.grid import Cell, Grid
from ..core.position import Position
from ..errors import MalformedGridError, MazeFormatError


logger = logging.getLogger(__name__)


@dataclass
class Maze:
    """A loaded maze: its grid, endpoints and where it came from."""

    grid: Grid
    start: Position
    goal: Position
    source: str = "<memory>"

    @property
    def name(self) -> str:
        return Path(self.source).name


def parse_maze(
    lines: Iterable[str],
    markers: Optional[MazeConfig] = None,
    source: str = "<memory>",
) -> Maze:
    """Parse maze ``lines`` into a :class:`Maze`.

    Each non-empty line is one row. ``markers`` supplies the wall, free,
    start and goal characters and defaults to ``CONFIG.maze``. Start and
    goal cells are stored as free.
    """

    markers = markers or CONFIG.maze
    rows: List[List[Cell]] = []
    start: Optional[Position] = None
    goal: Optional[Position] = None

    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        y = len(rows)
        row: List[Cell] = []
        for x, ch in enumerate(line):
            if ch == markers.wall:
                row.append(Cell.WALL)
                continue
            if ch == markers.start:
                if start is not None:
                    raise MazeFormatError(f"{source}: more than one start marker {markers.start!r}")
                start = Position(x, y)
            elif ch == markers.goal:
                if goal is not None:
                    raise MazeFormatError(f"{source}: more than one goal marker {markers.goal!r}")
                goal = Position(x, y)
            elif ch != markers.free:
                raise MazeFormatError(f"{source}: unknown character {ch!r} at ({x}, {y})")
            row.append(Cell.FREE)
        rows.append(row)

    if not rows:
        raise MalformedGridError(f"{source}: maze is empty")
    if start is None:
        raise MazeFormatError(f"{source}: no start marker {markers.start!r}")
    if goal is None:
        raise MazeFormatError(f"{source}: no goal marker {markers.goal!r}")

    grid = Grid.from_rows(rows)
    logger.debug("Parsed %s: %dx%d, start %s, goal %s", source, grid.cols, grid.rows, start, goal)
    return Maze(grid=grid, start=start, goal=goal, source=source)


def load_maze(path: str | Path, markers: Optional[MazeConfig] = None) -> Maze:
    """Read the maze file at ``path``."""

    path = Path(path)
    with open(path, "r", encoding="utf-8") as fh:
        maze = parse_maze(fh, markers, source=str(path))
    logger.info("Loaded maze %s (%dx%d)", path, maze.grid.cols, maze.grid.rows)
    return maze


__all__ = ["Maze", "parse_maze", "load_maze"]
