#!/usr/bin/env python3
"""
BenchmarkSuite: Orchestrates all experiments in the UI-Thread Responsiveness Benchmark Suite.

This module provides a unified interface to run all experiments, generate visualizations,
and export results. It can be used programmatically or via the CLI runner.
"""

import os
from typing import Dict, Any, Callable, List, Optional

import pandas as pd

from .common import (
    CONFIG,
    ExperimentResult,
    HostPlatform,
    MeasurementSample,
    PlatformCapabilities,
    ResultHistory,
    StartupContext,
    TestKind,
)
from .experiments import (
    Experiment1CPU,
    Experiment2Scroll,
    Experiment3Memory,
    Experiment4Startup,
)
from .visualization import generate_all_plots


class BenchmarkSuite:
    """
    Benchmark suite measuring how responsive a single UI thread stays.

    Experiments:
        1. CPU: Sieve of Eratosthenes timed on the calling thread
        2. Scroll: FPS and jank of a simulated scrolling list, battery drain
        3. Memory: RSS growth while a list of items is held
        4. Startup: Time to interactive from a labelled capture point

    Usage:
        startup = StartupContext.capture()
        suite = BenchmarkSuite(startup=startup)
        suite.run_all()

        # Run specific experiments
        suite = BenchmarkSuite()
        suite.run_experiment(1)  # Just CPU
        suite.run_experiment(2)  # Just scroll
        suite.generate_plots()
        suite.save_results()
    """

    def __init__(
        self,
        config: Dict[str, Any] = None,
        startup: Optional[StartupContext] = None,
        platform: Optional[PlatformCapabilities] = None,
        sink: Callable[[str], None] = print
    ):
        """
        Initialize the benchmark suite.

        Args:
            config: Configuration dictionary. Uses default CONFIG if not provided.
            startup: Startup context created by the entry point. A fresh one
                is captured here if not provided.
            platform: Clock and battery capabilities (default: host machine)
            sink: Log sink for all console output
        """
        self.config = config or CONFIG
        self.sink = sink
        self.platform = platform or HostPlatform(sink=sink)
        self.startup = startup or StartupContext.capture(
            platform_label=self.config["platform_label"],
            sink=sink,
        )
        self.results: List[ExperimentResult] = []
        self.all_results_df: Optional[pd.DataFrame] = None
        self._experiments: Dict[int, Any] = {}
        self.histories: Dict[TestKind, ResultHistory[MeasurementSample]] = {
            kind: ResultHistory(self.config["max_test_history"]) for kind in TestKind
        }

    def _get_experiment(self, experiment_id: int):
        # Instances are reused so the CPU run history accumulates across calls
        if experiment_id not in self._experiments:
            if experiment_id == 1:
                experiment = Experiment1CPU(self.config, self.platform, self.sink)
            elif experiment_id == 2:
                experiment = Experiment2Scroll(self.config, self.platform, self.sink)
            elif experiment_id == 3:
                experiment = Experiment3Memory(self.config, self.sink)
            else:
                experiment = Experiment4Startup(self.config, self.startup, self.sink)
            self._experiments[experiment_id] = experiment
        return self._experiments[experiment_id]

    def print_banner(self) -> None:
        """Print the suite banner; this is the suite's first frame."""
        self.sink("\n" + "="*70)
        self.sink("🚀 UI-THREAD RESPONSIVENESS BENCHMARK SUITE")
        self.sink("="*70)
        self.sink(f"   Platform: {self.config['platform_label']}")
        self.sink(f"   Sieve limit: {self.config['sieve_prime_limit']:,}")
        self.sink(f"   Scroll window: {self.config['scroll_duration_seconds']} s")
        self.sink(f"   CPU cores: {os.cpu_count()}")
        self.sink("="*70)
        self.startup.record_first_frame()

    def run_experiment(self, experiment_id: int) -> Optional[ExperimentResult]:
        """
        Run a specific experiment by ID.

        Args:
            experiment_id: Experiment number (1-4)

        Returns:
            ExperimentResult or None if invalid ID
        """
        if experiment_id not in (1, 2, 3, 4):
            self.sink(f"Invalid experiment ID: {experiment_id}. Must be 1-4.")
            return None

        result = self._get_experiment(experiment_id).run()

        # Add to results list, replacing any existing result with same ID
        self.results = [r for r in self.results if r.experiment_id != experiment_id]
        self.results.append(result)
        self.results.sort(key=lambda r: r.experiment_id)

        for sample in result.metadata.get("samples", []):
            self.histories[sample.kind].add(sample)

        return result

    def run_experiments(self, experiment_ids: List[int]) -> List[ExperimentResult]:
        """
        Run multiple specific experiments.

        Args:
            experiment_ids: List of experiment numbers to run

        Returns:
            List of ExperimentResult objects
        """
        results = []
        for exp_id in experiment_ids:
            result = self.run_experiment(exp_id)
            if result is not None:
                results.append(result)
        return results

    def generate_plots(self, output_dir: str = ".") -> List[str]:
        """
        Generate visualization plots for all completed experiments.

        Args:
            output_dir: Directory to save plot files

        Returns:
            List of paths to generated plot files
        """
        return generate_all_plots(
            self.results,
            output_dir,
            dpi=self.config.get("plot_dpi", 150),
            sink=self.sink,
        )

    def save_results(self, output_path: str = None) -> str:
        """
        Save all results to CSV.

        Args:
            output_path: Path to save CSV file

        Returns:
            Path to saved file
        """
        output_path = output_path or self.config.get("output_csv", "results.csv")

        self.sink(f"\n   Saving results to: {output_path}")

        all_rows = []

        for result in self.results:
            if result.data.empty:
                continue
            df = result.data.copy()
            df["Experiment"] = result.experiment_name
            df["Experiment_ID"] = result.experiment_id
            all_rows.append(df)

        if all_rows:
            combined_df = pd.concat(all_rows, ignore_index=True)
            combined_df.to_csv(output_path, index=False)
            self.all_results_df = combined_df
            self.sink(f"   ✓ Saved {len(combined_df)} rows")
        else:
            self.sink("   ⚠️  No results to save")

        return output_path

    def run_all(self, output_dir: str = ".", plots: bool = True) -> None:
        """
        Run all experiments and generate outputs.

        Args:
            output_dir: Directory to save plots and CSV
            plots: Whether to generate plots
        """
        self.print_banner()

        # Startup is reported last so it reflects the banner's first frame
        for exp_id in range(1, 5):
            self.run_experiment(exp_id)

        plot_files = self.generate_plots(output_dir) if plots else []

        csv_path = os.path.join(output_dir, self.config.get("output_csv", "results.csv"))
        self.save_results(csv_path)

        self.sink("\n" + "="*70)
        self.sink("📊 BENCHMARK COMPLETE")
        self.sink("="*70)
        self.sink(f"   Results CSV: {csv_path}")
        self.sink(f"   Generated plots: {len(plot_files)}")
        for pf in plot_files:
            self.sink(f"      - {pf}")

    def get_results_dataframe(self) -> Optional[pd.DataFrame]:
        """Get combined results as a pandas DataFrame."""
        return self.all_results_df

    def get_experiment_result(self, experiment_id: int) -> Optional[ExperimentResult]:
        """Get result for a specific experiment."""
        return next((r for r in self.results if r.experiment_id == experiment_id), None)

    def get_history(self, kind: TestKind) -> ResultHistory[MeasurementSample]:
        """Get the most-recent-first sample history for one test kind."""
        return self.histories[kind]
