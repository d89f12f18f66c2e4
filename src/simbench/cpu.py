"""Parametric CPU model that turns wall-clock measurements into simulated time."""

from dataclasses import dataclass

from .config import InvalidConfigurationError

MIN_CLOCK_MULTIPLIER = 1e-9
MICROSECONDS_PER_SECOND = 1e6


@dataclass(frozen=True)
class CPUModel:
    """A named CPU profile.

    The simulated time of a trial is the measured time scaled by the clock
    multiplier plus a cache-miss penalty charged per memory access.

    Attributes:
        name: Identifier used in reports
        clock_multiplier: Relative clock speed; 2.0 halves the measured time
        cache_miss_penalty: Cost of one cache miss in microseconds
        cache_miss_rate: Fraction of memory accesses that miss, in [0, 1]
    """

    name: str
    clock_multiplier: float
    cache_miss_penalty: float
    cache_miss_rate: float

    def __post_init__(self):
        """Reject parameters that would yield infinite or sign-flipped times."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidConfigurationError("name must be a non-empty string")
        if not self.clock_multiplier >= MIN_CLOCK_MULTIPLIER:
            raise InvalidConfigurationError(
                f"clock_multiplier must be positive, got {self.clock_multiplier}"
            )
        if not self.cache_miss_penalty >= 0:
            raise InvalidConfigurationError(
                f"cache_miss_penalty must be non-negative, got {self.cache_miss_penalty}"
            )
        if not 0.0 <= self.cache_miss_rate <= 1.0:
            raise InvalidConfigurationError(
                f"cache_miss_rate must be within [0, 1], got {self.cache_miss_rate}"
            )

    @property
    def penalty_per_access(self) -> float:
        """Expected cache-miss cost of a single memory access, in seconds."""
        return (self.cache_miss_penalty / MICROSECONDS_PER_SECOND) * self.cache_miss_rate

    def simulate_time(self, measured_seconds: float, memory_accesses: int) -> float:
        """Transform a raw measurement into simulated seconds.

        Args:
            measured_seconds: Wall-clock duration of the algorithm call
            memory_accesses: Accesses reported by the algorithm's counter

        Returns:
            measured_seconds / clock_multiplier plus the cache-miss penalty
        """
        base = measured_seconds / self.clock_multiplier
        return base + self.penalty_per_access * memory_accesses


BASIC = CPUModel("Basic", 1.0, 50, 0.02)
MID = CPUModel("Mid", 2.0, 30, 0.015)
PRO = CPUModel("Pro", 4.0, 10, 0.01)

DEFAULT_CPU_MODELS = (BASIC, MID, PRO)
