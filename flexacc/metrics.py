"""
Sweep Metrics - timing of coefficient sweeps.

Records how long a sweep took and how well the alignment cache served it.
"""

import time
from dataclasses import dataclass


@dataclass
class SweepMetrics:
    """Metrics for a single coefficient sweep."""
    trials: int = 0
    duration_ms: float = 0.0
    cache_entries: int = 0
    cache_hits: int = 0
    cache_misses: int = 0

    def to_dict(self) -> dict:
        return {
            "trials": self.trials,
            "duration_ms": round(self.duration_ms, 2),
            "cache_entries": self.cache_entries,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
        }

    def summary(self) -> str:
        """Generate human-readable summary."""
        lookups = self.cache_hits + self.cache_misses
        hit_rate = (self.cache_hits / lookups * 100) if lookups > 0 else 0
        return (
            f"{self.trials} trials in {self.duration_ms:.0f}ms, "
            f"{self.cache_entries} alignments cached ({hit_rate:.1f}% hits)"
        )


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self):
        self.start_time: float = 0
        self.end_time: float = 0
        self.duration_ms: float = 0

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.end_time = time.perf_counter()
        self.duration_ms = (self.end_time - self.start_time) * 1000
