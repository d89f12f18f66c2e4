"""Summary statistics over simulated trial times."""

from collections.abc import Sequence
from dataclasses import dataclass
import statistics
from typing import Optional


@dataclass(frozen=True)
class SummaryStatistics:
    """Mean and population standard deviation of one experiment's times."""

    mean: float = 0.0
    stddev: float = 0.0


def mean(series: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty series."""
    if not series:
        return 0.0
    return float(statistics.fmean(series))


def stddev(series: Sequence[float], mean_value: Optional[float] = None) -> float:
    """Population standard deviation (divides by N); 0.0 for an empty series.

    Args:
        series: Simulated times
        mean_value: Precomputed mean of `series`, computed here if omitted

    Returns:
        Standard deviation as a float
    """
    if not series:
        return 0.0
    if mean_value is None:
        mean_value = mean(series)
    return float(statistics.pstdev(series, mu=mean_value))


def summarize(series: Sequence[float]) -> SummaryStatistics:
    """Compute SummaryStatistics for a series of simulated times."""
    mean_value = mean(series)
    return SummaryStatistics(mean=mean_value, stddev=stddev(series, mean_value))
