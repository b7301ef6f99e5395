import io

from maze_search.io.maze_loader import parse_maze
from maze_search.render.terminal_view import TerminalView
from maze_search.core.position import Position


def _maze():
    return parse_maze(["S.#", "..G"])


def test_plain_lines_mark_path_and_endpoints():
    maze = _maze()
    path = [Position(2, 1), Position(1, 1), Position(1, 0), Position(0, 0)]
    view = TerminalView(colour=False)
    assert view.lines(maze.grid, path, maze.start, maze.goal) == ["S*#", " *G"]


def test_plain_lines_without_path():
    maze = _maze()
    assert TerminalView(colour=False).lines(maze.grid) == ["  #", "   "]


def test_coloured_render_writes_ansi_codes():
    maze = _maze()
    buf = io.StringIO()
    TerminalView(colour=True).render(maze.grid, [], maze.start, maze.goal, stream=buf)
    out = buf.getvalue()
    assert "\x1b[32mS" in out
    assert "\x1b[31mG" in out
    assert out.count("\x1b[0m") >= 2
    assert out.endswith("\n")
