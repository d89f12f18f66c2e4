"""Experiment runner that drives repeated trials through a CPU model."""

from collections.abc import Iterable
from typing import List, Optional, Tuple

import numpy as np

from .algorithms import Algorithm
from .config import ExperimentConfig, InvalidConfigurationError
from .cpu import CPUModel
from .inputs import generate_input, make_rng, pick_target
from .metrics import MemoryAccessCounter, time_execution
from .results import ExperimentReport, ReportCollector, TrialResult
from .stats import summarize


class ExperimentRunner:
    """Runs experiments for (algorithm, CPU model, input size) combinations."""

    def __init__(
        self,
        config: Optional[ExperimentConfig] = None,
        collector: Optional[ReportCollector] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """Initialize experiment runner.

        Args:
            config: Experiment configuration (defaults to ExperimentConfig())
            collector: Receives one report per experiment (a new one if omitted)
            rng: Generator for inputs and targets; built from config.seed if omitted
        """
        self.config = config or ExperimentConfig()
        self.collector = collector if collector is not None else ReportCollector()
        self.rng = rng if rng is not None else make_rng(self.config.seed)

    def measure_trial(self, algorithm: Algorithm, input_size: int) -> TrialResult:
        """Run the algorithm once on a fresh random input.

        Only the algorithm call is timed; input generation happens before
        the clock starts.
        """
        values = generate_input(self.rng, input_size)
        target = pick_target(self.rng, values)
        counter = MemoryAccessCounter()
        counter.reset()

        with time_execution() as timing:
            algorithm.run(values, target, counter)

        return TrialResult(
            raw_seconds=timing["elapsed_seconds"],
            memory_accesses=counter.value,
        )

    def run_trial(
        self, algorithm: Algorithm, cpu_model: CPUModel, input_size: int
    ) -> Tuple[float, TrialResult]:
        """Simulated time of a single trial, with the raw measurement it came from."""
        trial = self.measure_trial(algorithm, input_size)
        return cpu_model.simulate_time(trial.raw_seconds, trial.memory_accesses), trial

    def collect_times(
        self,
        algorithm: Algorithm,
        cpu_model: CPUModel,
        input_size: int,
        run_count: int,
    ) -> List[float]:
        """Run `run_count` sequential trials and return their simulated times.

        Returns:
            List with exactly `run_count` entries
        """
        times: List[float] = []
        for i in range(run_count):
            simulated, trial = self.run_trial(algorithm, cpu_model, input_size)
            times.append(simulated)

            if self.config.verbose:
                print(
                    f"  ✓ Trial {i + 1}/{run_count}: {simulated:.6f}s "
                    f"({trial.memory_accesses} accesses)"
                )
        return times

    def run_experiment(
        self,
        algorithm: Algorithm,
        cpu_model: CPUModel,
        input_size: int,
        run_count: Optional[int] = None,
    ) -> ExperimentReport:
        """Run one experiment and hand its report to the collector.

        Args:
            algorithm: Algorithm to benchmark
            cpu_model: CPU model applied to every trial
            input_size: Length of each generated input
            run_count: Number of trials (defaults to config.run_count)

        Returns:
            ExperimentReport with mean and population standard deviation
        """
        if run_count is None:
            run_count = self.config.run_count
        if run_count < 0:
            raise InvalidConfigurationError(f"run_count must be non-negative, got {run_count}")
        if input_size < 0:
            raise InvalidConfigurationError(f"input size must be non-negative, got {input_size}")

        if self.config.verbose:
            print(f"Starting experiment: {algorithm.name} on {cpu_model.name}, input size {input_size}, {run_count} runs")

        try:
            times = self.collect_times(algorithm, cpu_model, input_size, run_count)
        except Exception as e:
            if self.config.verbose:
                print(f"Experiment failed: {e}")
            raise

        summary = summarize(times)
        report = ExperimentReport(
            algorithm_name=algorithm.name,
            cpu_name=cpu_model.name,
            input_size=input_size,
            mean=summary.mean,
            stddev=summary.stddev,
        )
        self.collector.add_report(report)
        return report

    def run_grid(
        self,
        algorithms: Iterable[Algorithm],
        cpu_models: Iterable[CPUModel],
        input_sizes: Iterable[int],
        run_count: Optional[int] = None,
    ) -> ReportCollector:
        """Run every combination, algorithms outermost, then CPU models, then sizes.

        Returns:
            The runner's ReportCollector
        """
        cpu_models = tuple(cpu_models)
        input_sizes = tuple(input_sizes)
        for algorithm in algorithms:
            for cpu_model in cpu_models:
                for input_size in input_sizes:
                    self.run_experiment(algorithm, cpu_model, input_size, run_count)
        return self.collector
