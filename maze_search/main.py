# maze-search/maze_search/main.py
"""Command line entry point: load a maze, solve it, report the result."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from dotenv import load_dotenv

from .config import CONFIG_PATH, Config, LoggingConfig, load_config
from .errors import MazeSearchError
from .io.maze_loader import Maze, load_maze
from .io.path_writer import format_header, write_path
from .render.image import render_maze, save_maze_image
from .render.terminal_view import TerminalView
from .search import AStarEngine, SearchNode, SearchResult
from .utils.profiling import profile_runs, timed


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def configure_logging(cfg: LoggingConfig) -> None:
    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    # Apply per-module levels if defined
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-search", description="Solve a grid maze with A* search."
    )
    parser.add_argument("maze", nargs="?", help="maze text file (defaults to maze.path in the config)")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--output", default=None, help="file to write the path to")
    parser.add_argument("--image", default=None, help="PNG file to draw the solved maze to")
    parser.add_argument("--no-diagram", action="store_true", help="do not print the final diagram")
    parser.add_argument("--no-colour", action="store_true", help="print the diagram without ANSI colours")
    parser.add_argument("--step", action="store_true", help="wait for Enter between iterations")
    parser.add_argument("--max-iterations", type=int, default=None, help="stop after this many loops (0 = no limit)")
    parser.add_argument("--profile", type=int, default=0, metavar="N", help="profile N searches to profile.prof")
    return parser


def apply_overrides(cfg: Config, args: argparse.Namespace) -> Config:
    """Fold command line flags into ``cfg``."""

    if args.maze:
        cfg.maze.path = args.maze
    if args.output is not None:
        cfg.output.path_file = args.output
    if args.image is not None:
        cfg.output.image_file = args.image
    if args.no_diagram:
        cfg.output.show_diagram = False
    if args.no_colour:
        cfg.output.colour = False
    if args.step:
        cfg.search.pause_for_input = True
    if args.max_iterations is not None:
        cfg.search.max_iterations = args.max_iterations
    return cfg


class EnterPause:
    """Step hook that waits for Enter; stops pausing once input is closed."""

    def __init__(self) -> None:
        self.enabled = True

    def __call__(self, loop_count: int, node: SearchNode) -> None:
        if not self.enabled:
            return
        try:
            input(f"[{loop_count}] at {node.position} (depth {node.depth}), press Enter to continue...")
        except EOFError:
            logger.warning("Input closed at loop %d; continuing without pausing.", loop_count)
            self.enabled = False


def make_engine(maze: Maze, cfg: Config) -> AStarEngine:
    return AStarEngine(
        maze.grid,
        max_iterations=cfg.search.max_iterations,
        log_each_step=cfg.search.log_each_step,
        on_step=EnterPause() if cfg.search.pause_for_input else None,
    )


def report(
    maze: Maze,
    result: SearchResult,
    elapsed: float,
    cfg: Config,
    stream: Optional[TextIO] = None,
) -> None:
    """Print the diagram and statistics, then write the requested files."""

    stream = stream or sys.stdout
    if cfg.output.show_diagram:
        TerminalView(colour=cfg.output.colour).render(
            maze.grid, result.path, maze.start, maze.goal, stream=stream
        )

    if result.found and cfg.output.path_file:
        header = format_header(maze.grid.cols, maze.grid.rows, maze.name)
        out = write_path(result.path, cfg.output.path_file, header)
        logger.info("Path written to %s", out)
    if cfg.output.image_file:
        img = render_maze(maze.grid, result.path, maze.start, maze.goal, cfg.output.cell_size)
        out = save_maze_image(img, cfg.output.image_file)
        logger.info("Maze image written to %s", out)

    if not result.found:
        stream.write(f"No path found ({result.outcome.value}).\n")
    stream.write(f"Number of nodes visited: {result.expanded_count}\n")
    stream.write(f"Number of positions in final path: {len(result.path)} ({result.steps} steps)\n")
    stream.write(f"Execution time: {elapsed:.6f}s\n")
    stream.write(f"Loop count: {result.loop_count}\n")
    stream.flush()


def _load(cfg: Config) -> Optional[Maze]:
    """Load the configured maze, logging and returning ``None`` on failure."""

    if not cfg.maze.path:
        logger.error("No maze file given on the command line or in the config.")
        return None
    try:
        return load_maze(cfg.maze.path, cfg.maze)
    except OSError as exc:
        logger.error("Could not read maze %s: %s", cfg.maze.path, exc)
    except MazeSearchError as exc:
        logger.error("Invalid maze %s: %s", cfg.maze.path, exc)
    return None


def run(cfg: Config, stream: Optional[TextIO] = None) -> int:
    """Solve the maze named in ``cfg`` and return a process exit code."""

    stream = stream or sys.stdout
    maze = _load(cfg)
    if maze is None:
        return EXIT_BAD_INPUT

    try:
        stream.write(f"Start: {maze.start}\nGoal: {maze.goal}\n")
        engine = make_engine(maze, cfg)
        result, elapsed = timed(lambda: engine.search(maze.start, maze.goal))
    except MazeSearchError as exc:
        logger.error("Cannot search %s: %s", maze.source, exc)
        return EXIT_BAD_INPUT

    report(maze, result, elapsed, cfg, stream)
    return EXIT_FOUND if result.found else EXIT_NO_PATH


def main(argv: Optional[Sequence[str]] = None) -> int:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_iterations is not None and args.max_iterations < 0:
        parser.error("--max-iterations must not be negative")
    if args.profile < 0:
        parser.error("--profile must not be negative")
    config_path = args.config or Path(os.getenv("MAZE_SEARCH_CONFIG", CONFIG_PATH))
    cfg = apply_overrides(load_config(config_path), args)
    configure_logging(cfg.logging)

    if args.profile > 0:
        maze = _load(cfg)
        if maze is None:
            return EXIT_BAD_INPUT
        cfg.search.pause_for_input = False
        engine = make_engine(maze, cfg)
        out_path = Path("profile.prof")
        logger.info("Profiling %s searches. Output to %s", args.profile, out_path)
        results: list[SearchResult] = []
        stats = profile_runs(
            args.profile, lambda: results.append(engine.search(maze.start, maze.goal)), out_path
        )
        stats.sort_stats("cumulative").print_stats(15)
        return EXIT_FOUND if results[-1].found else EXIT_NO_PATH

    return run(cfg)


if __name__ == "__main__":
    sys.exit(main())
