"""
Hot-path profiling for the encoder and decoder.

Set ``JSONFIZZ_PROFILE`` in the environment before importing jsonfizz to
time the decorated scanners. Without it, ``hot_path`` hands back the
undecorated function, so production code pays nothing.
"""

import functools
import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "JSONFIZZ_PROFILE" in os.environ

_hot_path_stats: dict[str, "HotPathStats"] = {}


@dataclass
class HotPathStats:
    """Accumulated timings for one profiled function."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    max_time_ns: int = 0

    def record_call(self, duration_ns: int) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.max_time_ns = max(self.max_time_ns, duration_ns)

    @property
    def mean_time_ns(self) -> float:
        if not self.call_count:
            return 0.0
        return self.total_time_ns / self.call_count


def hot_path[F: Callable[..., Any]](name: str) -> Callable[[F], F]:
    """
    Marks a function as a hot path recorded under ``name``.

    The flag is read when the function is decorated, i.e. at import time
    for the library's own scanners.
    """

    def decorate(func: F) -> F:
        if not PROFILE_HOT_PATHS:
            return func

        @functools.wraps(func)
        def timed(*args: Any, **kwargs: Any) -> Any:
            start = time.perf_counter_ns()
            try:
                return func(*args, **kwargs)
            finally:
                stats = _hot_path_stats.get(name)
                if stats is None:
                    stats = _hot_path_stats[name] = HotPathStats(name)
                stats.record_call(time.perf_counter_ns() - start)

        return timed  # type: ignore[return-value]

    return decorate


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns current profiling statistics."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    """Clears profiling statistics."""
    _hot_path_stats.clear()
