"""Simple configuration loader for maze_search."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Options passed to the A* engine."""

    max_iterations: int = 0
    pause_for_input: bool = False
    log_each_step: bool = False


@dataclass
class MazeConfig:
    """Marker characters used by maze text files."""

    path: Optional[str] = None
    wall: str = "#"
    free: str = "."
    start: str = "S"
    goal: str = "G"


@dataclass
class OutputConfig:
    """Where and how search results are reported."""

    path_file: Optional[str] = "PathOutput.txt"
    image_file: Optional[str] = None
    show_diagram: bool = True
    colour: bool = True
    cell_size: int = 16


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig = field(default_factory=SearchConfig)
    maze: MazeConfig = field(default_factory=MazeConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search", {}) or {}
    search = SearchConfig(
        max_iterations=int(search_data.get("max_iterations", 0)),
        pause_for_input=bool(search_data.get("pause_for_input", False)),
        log_each_step=bool(search_data.get("log_each_step", False)),
    )

    maze_data = data.get("maze", {}) or {}
    maze = MazeConfig(
        path=maze_data.get("path"),
        wall=str(maze_data.get("wall", "#")),
        free=str(maze_data.get("free", ".")),
        start=str(maze_data.get("start", "S")),
        goal=str(maze_data.get("goal", "G")),
    )

    output_data = data.get("output", {}) or {}
    output = OutputConfig(
        path_file=output_data.get("path_file", "PathOutput.txt"),
        image_file=output_data.get("image_file"),
        show_diagram=bool(output_data.get("show_diagram", True)),
        colour=bool(output_data.get("colour", True)),
        cell_size=int(output_data.get("cell_size", 16)),
    )

    logging_data = data.get("logging", {}) or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    return Config(search=search, maze=maze, output=output, logging=log_cfg)


def load_config(path: str | Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`.

    A missing file yields the defaults. ``MAZE_SEARCH_LOG_LEVEL`` in the
    environment overrides ``logging.global_level``.
    """

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    cfg = _parse_config(raw)
    level = os.getenv("MAZE_SEARCH_LOG_LEVEL")
    if level:
        cfg.logging.global_level = level.upper()
    return cfg


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "MazeConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
]
