"""
Performance Timing Utilities for VehicleAnalytics

Decorator and context manager for timing view computations.

Usage:
    from vehicle_analytics.utils.performance import timed, PerformanceTimer

    @timed("views.yoy")
    def yoy(self, params):
        ...

    with PerformanceTimer("store.replace_all") as timer:
        ...
    # timer.elapsed_ms available after context exits
"""

import logging
import threading
import time
from collections import defaultdict, deque
from functools import wraps
from typing import Any, Callable, Deque, Dict


logger = logging.getLogger(__name__)

# Measurements kept per operation
HISTORY_SIZE = 100

_timings: Dict[str, Deque[float]] = defaultdict(lambda: deque(maxlen=HISTORY_SIZE))
_timings_lock = threading.Lock()


def record_timing(operation: str, elapsed_ms: float) -> None:
    """Record a timing measurement for an operation."""
    with _timings_lock:
        _timings[operation].append(elapsed_ms)


def get_timing_stats() -> Dict[str, Dict[str, float]]:
    """
    Get statistics for every timed operation.

    Returns:
        Mapping of operation name to count, avg, min, max and last (ms)
    """
    with _timings_lock:
        snapshot = {op: list(values) for op, values in _timings.items() if values}

    return {
        op: {
            "count": len(values),
            "avg": round(sum(values) / len(values), 3),
            "min": round(min(values), 3),
            "max": round(max(values), 3),
            "last": round(values[-1], 3)
        }
        for op, values in snapshot.items()
    }


def clear_timings() -> None:
    """Forget all recorded timings."""
    with _timings_lock:
        _timings.clear()


class PerformanceTimer:
    """
    Context manager for timing code blocks.

    Logs a warning when the block exceeds log_threshold_ms.
    """

    def __init__(self, operation: str, log_threshold_ms: float = 250.0):
        self.operation = operation
        self.log_threshold_ms = log_threshold_ms
        self.start_time: float = 0
        self.elapsed_ms: float = 0

    def __enter__(self) -> "PerformanceTimer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.elapsed_ms = (time.perf_counter() - self.start_time) * 1000
        record_timing(self.operation, self.elapsed_ms)

        if self.elapsed_ms >= self.log_threshold_ms:
            logger.warning(
                f"[PERF] {self.operation}: {self.elapsed_ms:.1f}ms (threshold: {self.log_threshold_ms}ms)"
            )
        else:
            logger.debug(f"[PERF] {self.operation}: {self.elapsed_ms:.1f}ms")


def timed(operation: str, log_threshold_ms: float = 250.0) -> Callable:
    """
    Decorator to time function execution.

    Args:
        operation: Name for this operation in the timing stats
        log_threshold_ms: Log warning if execution exceeds this (ms)
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            with PerformanceTimer(operation, log_threshold_ms):
                return func(*args, **kwargs)
        return wrapper
    return decorator


def format_perf_report() -> str:
    """
    Generate a formatted performance report, slowest operations first.

    Returns:
        Multi-line string with timing statistics
    """
    all_stats = get_timing_stats()
    if not all_stats:
        return "[PERF] No performance metrics recorded"

    lines = ["[PERF] Performance Report:", "-" * 60]
    for operation, stats in sorted(all_stats.items(), key=lambda item: item[1]["avg"], reverse=True):
        lines.append(
            f"  {operation}: avg={stats['avg']:.1f}ms, min={stats['min']:.1f}ms, "
            f"max={stats['max']:.1f}ms, count={stats['count']}"
        )
    lines.append("-" * 60)
    return "\n".join(lines)
