"""Measurement utilities shared by algorithms and the runner."""

from collections.abc import Generator
from contextlib import contextmanager
import time


class MemoryAccessCounter:
    """Counts the logical memory reads and writes of one trial.

    A counter belongs to exactly one in-flight trial. It is not thread-safe;
    concurrent trials need distinct counters.
    """

    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value = 0

    def reset(self) -> None:
        self.value = 0

    def increment(self, amount: int = 1) -> None:
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        self.value += amount

    def __repr__(self) -> str:
        return f"MemoryAccessCounter(value={self.value})"


@contextmanager
def time_execution() -> Generator[dict[str, float], None, None]:
    """Wall-clock timer for the body of a `with` block.

    The yielded dict gets an `elapsed_seconds` entry once the block exits,
    whether or not it raised. The runner wraps only the algorithm call.
    """
    timing: dict[str, float] = {}
    started = time.perf_counter()
    try:
        yield timing
    finally:
        timing["elapsed_seconds"] = time.perf_counter() - started
