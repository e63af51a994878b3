"""Wall-clock timing of no-argument callables."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

SAMPLES = 15

T = TypeVar("T")


@dataclass(frozen=True)
class Benchmark(Generic[T]):
    """Duration (in seconds) of one call and the value it returned."""

    time: float
    result: T

    def __str__(self) -> str:
        return f"Returned {self.result!r} in {_format_duration(self.time)}."

    def msg(self, label: str) -> str:
        """Return the benchmark message prefixed by ``label``."""

        return f"{label}: {self}"


def _format_duration(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.3f}µs"
    return f"{seconds * 1e9:.0f}ns"


def exec_time(f: Callable[[], T]) -> Benchmark[T]:
    """Call ``f`` once and return its duration and result."""

    start = time.perf_counter()
    result = f()
    elapsed = time.perf_counter() - start
    return Benchmark(time=elapsed, result=result)


def med_exec_time(f: Callable[[], T], samples: int = SAMPLES) -> Benchmark[T]:
    """Return the median of ``samples`` timed calls of ``f``."""

    if samples < 1:
        raise ValueError(f"At least one sample is required, got {samples}")
    benchmarks = sorted((exec_time(f) for _ in range(samples)), key=lambda bench: bench.time)
    return benchmarks[samples // 2]


__all__ = ["Benchmark", "SAMPLES", "exec_time", "med_exec_time"]
