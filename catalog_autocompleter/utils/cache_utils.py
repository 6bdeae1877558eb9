# cache_utils.py - v small timing helpers shared by the cli and profiler

from functools import wraps
import time
from typing import Callable, Dict, Optional, Tuple

# label -> (total seconds, calls)
Timings = Dict[str, Tuple[float, int]]


def record(timings: Timings, label: str, dt: float) -> None:
    """Add one call of `dt` seconds to the running total for `label`."""
    total, n = timings.get(label, (0.0, 0))
    timings[label] = (total + dt, n + 1)


def average_ms(timings: Timings) -> Dict[str, float]:
    return {label: total / n * 1000.0 for label, (total, n) in timings.items() if n}


def timed(label: str, timings: Optional[Timings] = None) -> Callable:
    """
    Decorator factory, the wrapped call returns (result, elapsed).
    When `timings` is given the elapsed time is also recorded under `label`.
        words, dt = timed("complete", stats)(trie.find_completions)("an")
    """
    def _decor(func: Callable) -> Callable:
        @wraps(func)
        def _wrap(*a, **kw):
            t0 = time.perf_counter()
            res = func(*a, **kw)
            dt = time.perf_counter() - t0
            if timings is not None:
                record(timings, label, dt)
            return res, dt
        return _wrap
    return _decor
