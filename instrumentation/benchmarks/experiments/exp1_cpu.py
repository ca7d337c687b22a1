#!/usr/bin/env python3
"""
===================================================================================
Experiment 1: CPU Efficiency (Sieve of Eratosthenes)
===================================================================================

Counts all primes up to 1,000,000 with a Sieve of Eratosthenes, running on
the CALLING THREAD on purpose. In the reference apps that thread is the UI
thread, so the number captured is the total time the UI is blocked, not the
computation time in isolation.

Methodology:
- Monotonic timestamp immediately before and after the call
- Each run is validated against the known prime count (78,498)
- Runs are kept in a most-recent-first history capped at 10 entries
- Mean/min/max/std are reported once two or more runs exist

Usage:
    python -m instrumentation.benchmarks.experiments.exp1_cpu
    python -m instrumentation.benchmarks.experiments.exp1_cpu --runs 10
    python -m instrumentation.benchmarks.experiments.exp1_cpu --limit 100000
"""

from datetime import datetime
from typing import Dict, Any, Callable, Optional

import pandas as pd

from ..common import (
    CONFIG,
    CPUTestResult,
    ExperimentResult,
    HostPlatform,
    PlatformCapabilities,
    ResultHistory,
    format_microseconds,
    log_cpu_result,
    time_prime_count,
)


class Experiment1CPU:
    """
    Experiment 1: Time the sieve on the calling thread.

    The history survives across `run()` calls on the same instance, the
    same way the reference apps keep results until the user clears them.
    """

    def __init__(
        self,
        config: Dict[str, Any] = None,
        platform: Optional[PlatformCapabilities] = None,
        sink: Callable[[str], None] = print
    ):
        """Initialize the experiment with configuration."""
        self.config = config or CONFIG
        self.sink = sink
        self.platform = platform or HostPlatform(sink=sink)

        if self.config["sieve_prime_limit"] < 0:
            raise ValueError(f"sieve_prime_limit must be >= 0, got {self.config['sieve_prime_limit']}")

        self.history: ResultHistory[CPUTestResult] = ResultHistory(self.config["max_test_history"])

    def run_once(self) -> CPUTestResult:
        """Run and log a single timed sieve pass."""
        limit = self.config["sieve_prime_limit"]
        prime_count, elapsed_us = time_prime_count(limit, clock=self.platform.now)

        log_cpu_result(self.config["platform_label"], limit, prime_count, elapsed_us, self.sink)

        result = CPUTestResult(
            execution_time_us=elapsed_us,
            prime_count=prime_count,
            timestamp=datetime.now(),
            expected_prime_count=self.config["expected_prime_count"],
        )
        self.history.add(result)
        return result

    def clear_history(self) -> None:
        self.history.clear()

    def run(self) -> ExperimentResult:
        """
        Run the CPU experiment.

        Returns:
            ExperimentResult with one row per run and aggregate stats
        """
        self.sink("\n" + "="*70)
        self.sink("EXPERIMENT 1: CPU Efficiency (Sieve of Eratosthenes)")
        self.sink("="*70)

        num_runs = self.config["cpu_runs"]
        self.sink(f"   Limit: {self.config['sieve_prime_limit']:,}")
        self.sink(f"   Running {num_runs} timed runs on the calling thread...")

        results = [self.run_once() for _ in range(num_runs)]

        invalid = [r for r in results if not r.is_valid]
        if invalid:
            self.sink(f"   ⚠️  {len(invalid)} run(s) returned an unexpected prime count "
                      f"(expected {self.config['expected_prime_count']:,})")

        df = pd.DataFrame({
            "Run": list(range(1, len(results) + 1)),
            "Execution Time (us)": [r.execution_time_us for r in results],
            "Execution Time (ms)": [r.execution_time_ms for r in results],
            "Primes Found": [r.prime_count for r in results],
            "Valid": [r.is_valid for r in results],
            "Timestamp": [r.timestamp.isoformat() for r in results],
        })

        stats = self.history.statistics("execution_time_us")
        metadata = {
            "limit": self.config["sieve_prime_limit"],
            "runs": len(results),
            "history_size": len(self.history),
            "all_valid": not invalid,
            "mean_us": stats.mean,
            "min_us": stats.min,
            "max_us": stats.max,
            "std_us": stats.std_dev,
            "samples": [r.to_sample() for r in results],
        }

        if len(self.history) >= 2:
            self.sink(f"\n   Statistics over last {stats.count} runs:")
            self.sink(f"      Average: {format_microseconds(stats.mean)}")
            self.sink(f"      Min:     {format_microseconds(stats.min)}")
            self.sink(f"      Max:     {format_microseconds(stats.max)}")
            self.sink(f"      Std Dev: {format_microseconds(stats.std_dev)}")

        self.sink(f"\n{df.drop(columns=['Timestamp']).to_string(index=False)}")

        return ExperimentResult("cpu", 1, df, metadata)


def main():
    """CLI entry point for Experiment 1."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Experiment 1: CPU Efficiency (Sieve of Eratosthenes)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--runs", type=int, default=None, help="Number of timed runs")
    parser.add_argument("--limit", type=int, default=None, help="Sieve upper limit")

    args = parser.parse_args()

    config = CONFIG.copy()
    if args.runs:
        config["cpu_runs"] = args.runs
    if args.limit is not None:
        config["sieve_prime_limit"] = args.limit

    experiment = Experiment1CPU(config)
    result = experiment.run()

    if not result.data.empty:
        output_path = "exp1_cpu_results.csv"
        result.data.to_csv(output_path, index=False)
        print(f"\n   ✓ Results saved to: {output_path}")

    return result


if __name__ == "__main__":
    main()
