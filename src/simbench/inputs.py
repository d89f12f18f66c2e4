"""Random input generation for benchmark trials."""

from collections.abc import Sequence
from typing import Optional

import numpy as np

from .config import InvalidConfigurationError

VALUE_RANGE_FACTOR = 10


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the generator threaded through a benchmark run.

    Args:
        seed: Seed for reproducible inputs, or None for fresh entropy

    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)


def generate_input(rng: np.random.Generator, size: int) -> list[int]:
    """Draw `size` integers uniformly from [0, max(1, size * 10)).

    Args:
        rng: Generator to draw from
        size: Number of elements (0 yields an empty list)

    Returns:
        List of Python ints
    """
    if size < 0:
        raise InvalidConfigurationError(f"input size must be non-negative, got {size}")
    upper = max(1, size * VALUE_RANGE_FACTOR)
    return rng.integers(0, upper, size=size).tolist()


def pick_target(rng: np.random.Generator, values: Sequence[int]) -> Optional[int]:
    """Pick a uniformly random element of `values`, or None if it is empty."""
    if not values:
        return None
    return values[int(rng.integers(len(values)))]
