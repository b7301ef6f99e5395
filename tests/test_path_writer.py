from pathlib import Path

from maze_search.core.position import Position
from maze_search.io.path_writer import format_header, write_path


def test_format_header():
    assert format_header(10, 8, "small.txt") == "--- A* SEARCH 10x8 [small.txt] ---"


def test_write_path_lists_start_to_goal(tmp_path: Path):
    goal_first = [Position(2, 0), Position(1, 0), Position(0, 0)]
    out = write_path(goal_first, tmp_path / "out" / "path.txt", "HEADER")

    assert out.exists()
    assert out.read_text(encoding="utf-8").splitlines() == [
        "HEADER",
        "(0, 0)",
        "(1, 0)",
        "(2, 0)",
    ]
