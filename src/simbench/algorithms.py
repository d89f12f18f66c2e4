"""Algorithm interface and the benchmarked variants.

Every variant reports its memory traffic through a MemoryAccessCounter using
a fixed accounting convention, since the CPU model's cache-miss penalty is
charged per reported access:

- BubbleSort: 2 accesses per adjacent comparison, 4 more per swap.
- LinearSearch: 1 access per inspected element.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, Optional, TypeVar

from .metrics import MemoryAccessCounter

ResultT = TypeVar("ResultT")

COMPARISON_ACCESSES = 2
SWAP_ACCESSES = 4
INSPECTION_ACCESSES = 1
NOT_FOUND = -1


class Algorithm(ABC, Generic[ResultT]):
    """Abstract base class for benchmarked algorithms.

    The runner calls run() once per trial with a counter that starts at zero.
    Implementations only increment the counter and must leave the caller's
    input unmodified. The returned value is never inspected by the runner.
    """

    name: str = ""

    @abstractmethod
    def run(
        self,
        values: Sequence[int],
        target: Optional[int],
        counter: MemoryAccessCounter,
    ) -> ResultT:
        """Execute the algorithm once.

        Args:
            values: Input integers for this trial.
            target: Value to look for, or None when the input is empty.
            counter: Per-trial memory access counter to increment.

        Returns:
            Variant-specific result.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class BubbleSort(Algorithm[list[int]]):
    """Bubble sort over a private copy of the input."""

    name = "Bubble Sort"

    def run(self, values, target, counter):
        ordered = list(values)
        n = len(ordered)
        for i in range(n):
            for j in range(n - i - 1):
                counter.increment(COMPARISON_ACCESSES)
                if ordered[j] > ordered[j + 1]:
                    ordered[j], ordered[j + 1] = ordered[j + 1], ordered[j]
                    counter.increment(SWAP_ACCESSES)
        return ordered


class LinearSearch(Algorithm[int]):
    """Index of the first element equal to the target, or -1."""

    name = "Linear Search"

    def run(self, values, target, counter):
        for index, value in enumerate(values):
            counter.increment(INSPECTION_ACCESSES)
            if target is not None and value == target:
                return index
        return NOT_FOUND


DEFAULT_ALGORITHMS: tuple[Algorithm, ...] = (BubbleSort(), LinearSearch())


def get_algorithm(name: str) -> Algorithm:
    """Look up one of the default algorithms by display name (case-insensitive)."""
    for algorithm in DEFAULT_ALGORITHMS:
        if algorithm.name.lower() == name.strip().lower():
            return algorithm
    available = ", ".join(a.name for a in DEFAULT_ALGORITHMS)
    raise KeyError(f"Unknown algorithm {name!r}; available: {available}")
