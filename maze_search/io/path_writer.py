"""Write a solved path to a text file."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..core.position import Position


def format_header(cols: int, rows: int, maze_name: str) -> str:
    return f"--- A* SEARCH {cols}x{rows} [{maze_name}] ---"


def write_path(
    path: Sequence[Position],
    out_path: str | Path,
    header: str,
) -> Path:
    """Write ``header`` then one ``(x, y)`` line per position to ``out_path``.

    ``path`` is given goal first, as returned by the search; the file lists
    it from start to goal.
    """

    out = Path(out_path)
    if not out.parent.exists():
        out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as fh:
        fh.write(header + "\n")
        for pos in reversed(path):
            fh.write(f"{pos}\n")
    return out


__all__ = ["format_header", "write_path"]
