"""Configuration classes for benchmark execution."""

from dataclasses import dataclass
from typing import Optional

DEFAULT_RUN_COUNT = 5
DEFAULT_INPUT_SIZES = (100, 500, 1000)


class InvalidConfigurationError(ValueError):
    """Raised when a benchmark parameter cannot produce meaningful timings."""


@dataclass
class ExperimentConfig:
    """Configuration for experiment execution.

    Attributes:
        run_count: Number of trials per experiment (default: 5)
        seed: Optional seed for the input generator (default: None, fresh entropy)
        verbose: Enable verbose progress output (default: False)
    """

    run_count: int = DEFAULT_RUN_COUNT
    seed: Optional[int] = None
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.run_count < 0:
            raise InvalidConfigurationError("run_count must be non-negative")


@dataclass
class GridConfig:
    """Input sizes swept by the driver for every algorithm and CPU model."""

    input_sizes: tuple[int, ...] = DEFAULT_INPUT_SIZES

    def __post_init__(self):
        self.input_sizes = tuple(self.input_sizes)
        if any(size < 0 for size in self.input_sizes):
            raise InvalidConfigurationError("input sizes must be non-negative")
