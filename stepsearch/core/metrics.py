# stepsearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import time, tracemalloc


@dataclass
class RunSummary:
    """Outcome of stepping one session until it stopped."""
    algo: str
    outcome: str            # "found", "failure", "cutoff" or "stopped" (step cap hit)
    path: List[str]
    cost: Optional[int]
    steps: int
    expanded: int
    time_s: float
    peak_kb: int
    extras: dict = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.outcome == "found"


class MeasuredRun:
    """Times a with-block and records its tracemalloc peak; read the results after exit."""

    def __init__(self) -> None:
        self.elapsed: float = 0.0
        self.peak_kb: int = 0

    def __enter__(self) -> "MeasuredRun":
        tracemalloc.start()
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._t0
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self.peak_kb = peak // 1024
        return False
