"""Per-trial records and the per-experiment report collector."""

from dataclasses import asdict, dataclass
from typing import List

import pandas as pd

TABLE_HEADER = "| Algorithm    | CPU    | Input |   Mean(s)   |  StdDev(s)  |"
TABLE_SEPARATOR = "|--------------|--------|-------|-------------|-------------|"
ROW_FORMAT = "| {algorithm_name:<12} | {cpu_name:<6} | {input_size:6d} | {mean:10.6f} | {stddev:10.6f} |"


@dataclass(frozen=True)
class TrialResult:
    """Raw outcome of one trial, before the CPU model transform.

    Attributes:
        raw_seconds: Wall-clock duration of the algorithm call
        memory_accesses: Final value of the trial's counter
    """

    raw_seconds: float
    memory_accesses: int


@dataclass(frozen=True)
class ExperimentReport:
    """Summary of one (algorithm, CPU model, input size) experiment.

    Attributes:
        algorithm_name: Display name of the algorithm
        cpu_name: Name of the CPU model
        input_size: Length of each generated input
        mean: Mean simulated time in seconds
        stddev: Population standard deviation of simulated times
    """

    algorithm_name: str
    cpu_name: str
    input_size: int
    mean: float
    stddev: float


class ReportCollector:
    """Collects experiment reports and renders them as a fixed-width table."""

    def __init__(self):
        self.reports: List[ExperimentReport] = []

    def add_report(self, report: ExperimentReport) -> None:
        """Add a report to the collection.

        Args:
            report: Experiment report to add
        """
        self.reports.append(report)

    def __len__(self) -> int:
        return len(self.reports)

    @staticmethod
    def format_header() -> str:
        return f"{TABLE_HEADER}\n{TABLE_SEPARATOR}"

    @staticmethod
    def format_row(report: ExperimentReport) -> str:
        return ROW_FORMAT.format(**asdict(report))

    def format_table(self) -> str:
        """Render the header followed by one row per report."""
        lines = [self.format_header()]
        lines.extend(self.format_row(report) for report in self.reports)
        return "\n".join(lines)

    def print_table(self) -> None:
        """Print collected reports to console."""
        if not self.reports:
            print("No results collected.")
            return
        print(self.format_table())

    def to_dataframe(self) -> pd.DataFrame:
        """Collected reports as a DataFrame, one row per experiment.

        Returns:
            DataFrame with algorithm_name, cpu_name, input_size, mean and stddev columns
        """
        columns = ["algorithm_name", "cpu_name", "input_size", "mean", "stddev"]
        return pd.DataFrame([asdict(report) for report in self.reports], columns=columns)
