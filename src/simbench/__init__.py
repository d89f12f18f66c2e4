"""Micro-benchmarking harness with a parametric CPU performance model."""

from .algorithms import DEFAULT_ALGORITHMS, Algorithm, BubbleSort, LinearSearch, get_algorithm
from .config import ExperimentConfig, GridConfig, InvalidConfigurationError
from .cpu import BASIC, DEFAULT_CPU_MODELS, MID, PRO, CPUModel
from .inputs import generate_input, make_rng, pick_target
from .metrics import MemoryAccessCounter, time_execution
from .results import ExperimentReport, ReportCollector, TrialResult
from .runner import ExperimentRunner
from .stats import SummaryStatistics, mean, stddev, summarize

__all__ = [
    "Algorithm",
    "BASIC",
    "BubbleSort",
    "CPUModel",
    "DEFAULT_ALGORITHMS",
    "DEFAULT_CPU_MODELS",
    "ExperimentConfig",
    "ExperimentReport",
    "ExperimentRunner",
    "GridConfig",
    "InvalidConfigurationError",
    "LinearSearch",
    "MID",
    "MemoryAccessCounter",
    "PRO",
    "ReportCollector",
    "SummaryStatistics",
    "TrialResult",
    "generate_input",
    "get_algorithm",
    "make_rng",
    "mean",
    "pick_target",
    "stddev",
    "summarize",
    "time_execution",
]

__version__ = "0.1.0"
