"""Maze and path images using :mod:`Pillow`."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from ..core.grid import Grid
from ..core.position import Position


RGB = Tuple[int, int, int]

WALL_COLOUR: RGB = (30, 30, 40)
FREE_COLOUR: RGB = (235, 235, 235)
PATH_COLOUR: RGB = (240, 190, 40)
START_COLOUR: RGB = (40, 170, 80)
GOAL_COLOUR: RGB = (200, 50, 50)


def render_maze(
    grid: Grid,
    path: Sequence[Position] = (),
    start: Optional[Position] = None,
    goal: Optional[Position] = None,
    cell_size: int = 16,
) -> Image.Image:
    """Create an ``Image`` of ``grid`` with ``path`` drawn over it.

    Parameters
    ----------
    grid:
        Maze to draw; each cell becomes a ``cell_size`` square.
    path:
        Positions to mark, in any order.
    start, goal:
        Optional endpoints, drawn on top of the path.
    """

    if cell_size <= 0:
        raise ValueError("cell_size must be positive")

    img = Image.new("RGB", (grid.cols * cell_size, grid.rows * cell_size), FREE_COLOUR)
    draw = ImageDraw.Draw(img)

    def fill(pos: Position, colour: RGB) -> None:
        x0, y0 = pos.x * cell_size, pos.y * cell_size
        draw.rectangle([(x0, y0), (x0 + cell_size - 1, y0 + cell_size - 1)], fill=colour)

    for pos in grid.positions():
        if grid.is_wall(pos):
            fill(pos, WALL_COLOUR)
    for pos in path:
        fill(pos, PATH_COLOUR)
    if start is not None:
        fill(start, START_COLOUR)
    if goal is not None:
        fill(goal, GOAL_COLOUR)
    return img


def save_maze_image(img: Image.Image, out_path: str | Path) -> Path:
    out = Path(out_path)
    if not out.parent.exists():
        out.parent.mkdir(parents=True, exist_ok=True)
    img.save(out, format="PNG")
    return out


__all__ = ["render_maze", "save_maze_image"]
