"""Timing and cProfile helpers for measuring search runs."""

from __future__ import annotations

import cProfile
import pstats
import time
from pathlib import Path
from typing import Callable, Tuple, TypeVar


T = TypeVar("T")


def timed(callback: Callable[[], T]) -> Tuple[T, float]:
    """Run ``callback`` once and return ``(result, elapsed_seconds)``."""

    start = time.perf_counter()
    result = callback()
    return result, time.perf_counter() - start


def profile_runs(
    n: int,
    callback: Callable[[], object],
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``callback`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of times to call ``callback``.
    callback:
        Function under measurement, typically one full search.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    if n <= 0:
        raise ValueError("n must be positive")
    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        callback()
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["timed", "profile_runs"]
