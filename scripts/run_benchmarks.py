#!/usr/bin/env python3
"""Script to run the algorithm benchmarks against every CPU model."""

import argparse
from pathlib import Path
import sys

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from simbench import (
    DEFAULT_ALGORITHMS,
    DEFAULT_CPU_MODELS,
    ExperimentConfig,
    ExperimentRunner,
    GridConfig,
    get_algorithm,
)
from simbench.config import DEFAULT_INPUT_SIZES, DEFAULT_RUN_COUNT


def parse_sizes(raw: str) -> tuple[int, ...]:
    return tuple(int(s.strip()) for s in raw.split(",") if s.strip())


def main():
    """Run the benchmark grid and print the result table."""
    parser = argparse.ArgumentParser(description="Run simulated-CPU algorithm benchmarks.")
    parser.add_argument(
        "--runs",
        type=int,
        default=DEFAULT_RUN_COUNT,
        help="Number of trials per experiment.",
    )
    parser.add_argument(
        "--sizes",
        default=",".join(str(s) for s in DEFAULT_INPUT_SIZES),
        help="Comma-separated list of input sizes (e.g., 100,500,1000).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for input generation.",
    )
    parser.add_argument(
        "--algorithms",
        default=None,
        help="Comma-separated list of algorithms to run (e.g., 'Bubble Sort,Linear Search').",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print per-trial progress.",
    )
    args = parser.parse_args()

    if args.algorithms:
        try:
            algorithms = [get_algorithm(name) for name in args.algorithms.split(",") if name.strip()]
        except KeyError as e:
            parser.error(e.args[0])
    else:
        algorithms = list(DEFAULT_ALGORITHMS)

    config = ExperimentConfig(run_count=args.runs, seed=args.seed, verbose=args.verbose)
    grid = GridConfig(input_sizes=parse_sizes(args.sizes))

    if config.verbose:
        print("Running benchmarks:")
        print(f"  Algorithms: {', '.join(a.name for a in algorithms)}")
        print(f"  CPU models: {', '.join(c.name for c in DEFAULT_CPU_MODELS)}")
        print(f"  Input sizes: {', '.join(str(s) for s in grid.input_sizes)}")
        print(f"  Runs per experiment: {config.run_count}")
        print()

    runner = ExperimentRunner(config)
    collector = runner.run_grid(algorithms, DEFAULT_CPU_MODELS, grid.input_sizes)
    collector.print_table()


if __name__ == "__main__":
    main()
