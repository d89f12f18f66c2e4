"""Tests for the experiment runner."""

import pytest

from simbench import (
    DEFAULT_ALGORITHMS,
    DEFAULT_CPU_MODELS,
    Algorithm,
    BubbleSort,
    CPUModel,
    ExperimentConfig,
    ExperimentReport,
    ExperimentRunner,
    InvalidConfigurationError,
    LinearSearch,
    ReportCollector,
)

# Clock scaling makes the wall-clock share negligible next to the penalty
PENALTY_ONLY_CPU = CPUModel("Slow", clock_multiplier=1e9, cache_miss_penalty=100, cache_miss_rate=1.0)


class FixedAccessAlgorithm(Algorithm[None]):
    """Reports one access per element and records what it was given."""

    name = "Fixed"

    def __init__(self):
        self.calls = []

    def run(self, values, target, counter):
        self.calls.append((list(values), target, counter.value))
        counter.increment(len(values))


class FailingAlgorithm(Algorithm[None]):
    """Algorithm that always raises."""

    name = "Failing"

    def run(self, values, target, counter):
        raise ValueError("Intentional failure")


def test_run_experiment_reports_summary():
    """Mean reflects the per-access penalty, every trial identical."""
    algorithm = FixedAccessAlgorithm()
    runner = ExperimentRunner(ExperimentConfig(run_count=4, seed=1))

    report = runner.run_experiment(algorithm, PENALTY_ONLY_CPU, 50)

    assert report.algorithm_name == "Fixed"
    assert report.cpu_name == "Slow"
    assert report.input_size == 50
    assert report.mean == pytest.approx(50 * 100e-6, abs=1e-6)
    assert report.stddev == pytest.approx(0.0, abs=1e-6)
    assert runner.collector.reports == [report]
    assert len(algorithm.calls) == 4


def test_each_trial_gets_fresh_input_and_counter():
    algorithm = FixedAccessAlgorithm()
    runner = ExperimentRunner(ExperimentConfig(seed=5))

    runner.run_experiment(algorithm, PENALTY_ONLY_CPU, 30, run_count=3)

    for values, target, start in algorithm.calls:
        assert len(values) == 30
        assert target in values
        assert start == 0
    assert algorithm.calls[0][0] != algorithm.calls[1][0]


def test_collect_times_length():
    runner = ExperimentRunner(ExperimentConfig(seed=0))
    for run_count in (0, 1, 6):
        times = runner.collect_times(LinearSearch(), DEFAULT_CPU_MODELS[0], 20, run_count)
        assert len(times) == run_count


def test_zero_run_count():
    """No trials: empty series, zero statistics."""
    algorithm = FixedAccessAlgorithm()
    runner = ExperimentRunner(ExperimentConfig(run_count=0))

    report = runner.run_experiment(algorithm, PENALTY_ONLY_CPU, 100)

    assert algorithm.calls == []
    assert (report.mean, report.stddev) == (0.0, 0.0)


def test_zero_input_size():
    """Empty inputs: no target, no accesses."""
    algorithm = FixedAccessAlgorithm()
    runner = ExperimentRunner(ExperimentConfig(run_count=3, seed=2))

    runner.run_experiment(algorithm, PENALTY_ONLY_CPU, 0)

    assert algorithm.calls == [([], None, 0)] * 3
    for real in (BubbleSort(), LinearSearch()):
        trial = runner.measure_trial(real, 0)
        assert trial.memory_accesses == 0
        assert trial.raw_seconds >= 0.0


def test_measure_trial():
    runner = ExperimentRunner(ExperimentConfig(seed=3))
    trial = runner.measure_trial(BubbleSort(), 10)
    # 45 comparisons plus some number of swaps
    assert trial.memory_accesses >= 90
    assert (trial.memory_accesses - 90) % 4 == 0


def test_invalid_run_count():
    runner = ExperimentRunner()
    with pytest.raises(InvalidConfigurationError, match="run_count must be non-negative"):
        runner.run_experiment(LinearSearch(), PENALTY_ONLY_CPU, 10, run_count=-1)
    with pytest.raises(InvalidConfigurationError, match="input size must be non-negative"):
        runner.run_experiment(LinearSearch(), PENALTY_ONLY_CPU, -10)
    assert len(runner.collector) == 0


def test_failing_algorithm_propagates(capsys):
    runner = ExperimentRunner(ExperimentConfig(run_count=2, verbose=True))

    with pytest.raises(ValueError, match="Intentional failure"):
        runner.run_experiment(FailingAlgorithm(), PENALTY_ONLY_CPU, 5)

    assert "Experiment failed: Intentional failure" in capsys.readouterr().out
    assert len(runner.collector) == 0


def test_verbose_output(capsys):
    runner = ExperimentRunner(ExperimentConfig(run_count=2, seed=0, verbose=True))
    runner.run_experiment(LinearSearch(), PENALTY_ONLY_CPU, 10)

    out = capsys.readouterr().out
    assert "Starting experiment: Linear Search on Slow" in out
    assert "Trial 1/2" in out
    assert "Trial 2/2" in out


def test_seeded_runs_use_same_inputs():
    first, second = FixedAccessAlgorithm(), FixedAccessAlgorithm()
    ExperimentRunner(ExperimentConfig(seed=11)).run_experiment(first, PENALTY_ONLY_CPU, 25, run_count=3)
    ExperimentRunner(ExperimentConfig(seed=11)).run_experiment(second, PENALTY_ONLY_CPU, 25, run_count=3)
    assert first.calls == second.calls


def test_run_grid_order():
    """Algorithms outermost, then CPU models, then input sizes."""
    collector = ReportCollector()
    runner = ExperimentRunner(ExperimentConfig(run_count=1, seed=0), collector=collector)

    result = runner.run_grid(DEFAULT_ALGORITHMS, DEFAULT_CPU_MODELS, [0, 5])

    assert result is collector
    keys = [(r.algorithm_name, r.cpu_name, r.input_size) for r in collector.reports]
    expected = [
        (a.name, c.name, size)
        for a in DEFAULT_ALGORITHMS
        for c in DEFAULT_CPU_MODELS
        for size in (0, 5)
    ]
    assert keys == expected
    assert all(isinstance(r, ExperimentReport) for r in collector.reports)


def test_run_trial_matches_cpu_model():
    """Simulated time is the CPU model applied to the raw measurement."""
    runner = ExperimentRunner(ExperimentConfig(seed=4))
    cpu = CPUModel("Mid", 2.0, 30, 0.015)

    simulated, trial = runner.run_trial(FixedAccessAlgorithm(), cpu, 40)

    assert trial.memory_accesses == 40
    assert simulated == cpu.simulate_time(trial.raw_seconds, trial.memory_accesses)
    assert simulated >= 40 * 30e-6 * 0.015


def test_collect_times_goes_through_run_trial(monkeypatch):
    runner = ExperimentRunner(ExperimentConfig(seed=0))
    calls = []
    original = runner.run_trial

    def tracking_run_trial(algorithm, cpu_model, input_size):
        calls.append(input_size)
        return original(algorithm, cpu_model, input_size)

    monkeypatch.setattr(runner, "run_trial", tracking_run_trial)
    times = runner.collect_times(FixedAccessAlgorithm(), PENALTY_ONLY_CPU, 8, 3)

    assert calls == [8, 8, 8]
    assert times == pytest.approx([8 * 100e-6] * 3, abs=1e-6)
