"""A* engine behaviour on small hand-checked mazes."""

from pathlib import Path

import pytest

from maze_search.core.grid import Cell, Grid
from maze_search.core.position import Position
from maze_search.errors import InvalidEndpointError
from maze_search.io.maze_loader import load_maze
from maze_search.search.astar import AStarEngine, SearchOutcome, a_star
from maze_search.search.visited import VisitedTracker

MAZES = Path(__file__).resolve().parents[2] / "mazes"


def _grid(*rows: str) -> Grid:
    """Build a grid from strings where ``#`` is a wall."""
    return Grid.from_rows([[Cell.WALL if ch == "#" else Cell.FREE for ch in row] for row in rows])


def _assert_valid_path(grid: Grid, path: list[Position], start: Position, goal: Position) -> None:
    assert path[0] == goal and path[-1] == start
    for pos in path:
        assert grid.is_passable(pos)
    for a, b in zip(path, path[1:]):
        assert a.manhattan_to(b) == 1
    assert len(set(path)) == len(path)


# ---------- Hand-traced runs --------------------------------------------------


def test_open_3x3_corner_to_corner():
    grid = _grid("...", "...", "...")
    result = a_star(grid, Position(0, 0), Position(2, 2))

    assert result.outcome is SearchOutcome.GOAL_FOUND
    assert result.found
    assert result.path == [
        Position(2, 2),
        Position(1, 2),
        Position(1, 1),
        Position(0, 1),
        Position(0, 0),
    ]
    assert result.steps == 4
    assert result.loop_count == 5
    assert result.expanded_count == 0


def test_corridor_keeps_parent_ahead_of_lone_child():
    # A lone new node is compared with nothing and lands behind its parent,
    # so every cell is selected twice before it is expanded.
    grid = _grid("....")
    result = a_star(grid, Position(0, 0), Position(3, 0))

    assert result.found
    assert result.path == [Position(3, 0), Position(2, 0), Position(1, 0), Position(0, 0)]
    assert result.loop_count == 7
    assert result.expanded_count == 3


def test_step_hook_sees_each_selected_node():
    seen: list[tuple[int, Position]] = []
    engine = AStarEngine(_grid("...."), on_step=lambda i, node: seen.append((i, node.position)))
    engine.search(Position(0, 0), Position(3, 0))

    assert [i for i, _ in seen] == list(range(1, 8))
    assert [p.x for _, p in seen] == [0, 0, 1, 1, 2, 2, 3]


def test_start_equals_goal():
    grid = _grid("...", "...", "...")
    result = a_star(grid, Position(1, 1), Position(1, 1))

    assert result.found
    assert result.path == [Position(1, 1)]
    assert result.steps == 0
    assert result.loop_count == 1
    assert result.expanded_count == 0


# ---------- Failure outcomes --------------------------------------------------


def test_goal_behind_wall_single_row():
    result = a_star(_grid(".#."), Position(0, 0), Position(2, 0))

    assert result.outcome is SearchOutcome.FRONTIER_EMPTY
    assert not result.found
    assert result.path == []
    assert result.steps == 0
    assert result.loop_count == 1
    assert result.expanded_count == 1


def test_walled_off_goal_expands_every_reachable_cell():
    grid = _grid(
        "...",
        "..#",
        ".#.",
    )
    result = a_star(grid, Position(0, 0), Position(2, 2))

    assert result.outcome is SearchOutcome.FRONTIER_EMPTY
    assert result.path == []
    # six free cells are reachable from the start
    assert result.expanded_count == 6
    assert result.expanded_count <= grid.free_cell_count


def test_iteration_limit_stops_without_path():
    result = a_star(_grid("...."), Position(0, 0), Position(3, 0), max_iterations=2)

    assert result.outcome is SearchOutcome.ITERATION_LIMIT
    assert result.loop_count == 2
    assert result.path == []


def test_neighbours_filtered_through_tracker(monkeypatch):
    asked: list[Position] = []

    def always_known(self, pos):
        asked.append(pos)
        return True

    monkeypatch.setattr(VisitedTracker, "is_known", always_known)
    result = a_star(_grid("...", "...", "..."), Position(1, 1), Position(2, 2))

    assert result.outcome is SearchOutcome.FRONTIER_EMPTY
    assert result.loop_count == 1
    assert result.expanded_count == 1
    assert asked == [Position(1, 0), Position(0, 1), Position(2, 1), Position(1, 2)]


def test_negative_iteration_limit_rejected():
    with pytest.raises(ValueError):
        AStarEngine(_grid("."), max_iterations=-1)


@pytest.mark.parametrize(
    "start, goal",
    [
        (Position(-1, 0), Position(2, 0)),
        (Position(0, 0), Position(5, 0)),
        (Position(1, 0), Position(2, 0)),
        (Position(0, 0), Position(1, 0)),
    ],
)
def test_invalid_endpoints_rejected_before_search(start, goal):
    calls: list[int] = []
    engine = AStarEngine(_grid(".#."), on_step=lambda i, n: calls.append(i))
    with pytest.raises(InvalidEndpointError):
        engine.search(start, goal)
    assert calls == []


# ---------- General properties ------------------------------------------------


@pytest.mark.parametrize(
    "start, goal",
    [
        (Position(0, 0), Position(4, 0)),
        (Position(0, 0), Position(0, 4)),
        (Position(2, 2), Position(2, 2)),
        (Position(0, 0), Position(4, 4)),
        (Position(4, 4), Position(0, 0)),
        (Position(3, 0), Position(0, 2)),
    ],
)
def test_open_grid_paths_are_valid(start, goal):
    grid = _grid(*(["....."] * 5))
    result = a_star(grid, start, goal)

    assert result.found
    _assert_valid_path(grid, result.path, start, goal)
    assert result.steps >= start.manhattan_to(goal)
    assert result.expanded_count <= grid.free_cell_count


def test_open_grid_can_return_longer_path():
    # Only the newest node is re-slotted, so the walk commits to the lower
    # row before the direct neighbour along the top row is reconsidered.
    grid = Grid([Cell.FREE] * 8, rows=2, cols=4)
    start, goal = Position(2, 0), Position(0, 0)
    result = a_star(grid, start, goal)

    assert result.found
    assert result.path == [
        Position(0, 0),
        Position(0, 1),
        Position(1, 1),
        Position(2, 1),
        Position(2, 0),
    ]
    assert result.steps == 4
    assert start.manhattan_to(goal) == 2
    assert result.loop_count == 7
    assert result.expanded_count == 2


@pytest.mark.parametrize("goal_x", [1, 2, 5, 9])
def test_straight_corridor_is_shortest(goal_x):
    grid = _grid("." * 10)
    start, goal = Position(0, 0), Position(goal_x, 0)
    result = a_star(grid, start, goal)

    assert result.steps == start.manhattan_to(goal)


def test_detour_around_wall():
    grid = _grid(
        ".....",
        ".###.",
        ".#...",
        ".#.#.",
        "...#.",
    )
    start, goal = Position(2, 2), Position(4, 4)
    result = a_star(grid, start, goal)

    assert result.found
    _assert_valid_path(grid, result.path, start, goal)
    assert result.steps >= start.manhattan_to(goal)


def test_sample_maze_file_is_solved():
    maze = load_maze(MAZES / "small.txt")
    result = AStarEngine(maze.grid).search(maze.start, maze.goal)

    assert result.found
    _assert_valid_path(maze.grid, result.path, maze.start, maze.goal)
    assert result.steps >= maze.start.manhattan_to(maze.goal)
    assert result.expanded_count <= maze.grid.free_cell_count
