#!/usr/bin/env python3
"""
===================================================================================
Experiment 3: Memory Footprint
===================================================================================

Measures how much resident memory the process gains while it builds the
same synthetic list the scroll test uses (1000 items by default), each item
with a title, subtitle, rating and a small thumbnail buffer standing in for
a decoded image.

Methodology:
- Baseline RSS sampled before the list is built
- RSS sampled in the background while the list is built and held
- Items are released and a final RSS sample is taken

Usage:
    python -m instrumentation.benchmarks.experiments.exp3_memory
    python -m instrumentation.benchmarks.experiments.exp3_memory --items 5000
"""

import gc
import time
from typing import Dict, Any, Callable, List

import pandas as pd
import psutil

from ..common import (
    CONFIG,
    ExperimentResult,
    MeasurementSample,
    SystemMonitor,
    TestKind,
    log_memory_results,
)

THUMBNAIL_BYTES = 64 * 64 * 4  # 64x64 RGBA


def build_list_items(count: int) -> List[Dict[str, Any]]:
    """Synthetic list rows, one thumbnail buffer each."""
    return [
        {
            "title": f"Item #{i:04d}",
            "subtitle": f"Benchmark row {i} of {count}",
            "rating": i % 5 + 1,
            "thumbnail": bytearray(THUMBNAIL_BYTES),
        }
        for i in range(count)
    ]


class Experiment3Memory:
    """
    Experiment 3: RSS growth while a list of items is held in memory.
    """

    def __init__(
        self,
        config: Dict[str, Any] = None,
        sink: Callable[[str], None] = print
    ):
        """Initialize the experiment with configuration."""
        self.config = config or CONFIG
        self.sink = sink
        self.raw_samples: Dict[str, List] = {}

    def run(self) -> ExperimentResult:
        """
        Run the memory experiment.

        Returns:
            ExperimentResult with the RSS timeline
        """
        self.sink("\n" + "="*70)
        self.sink("EXPERIMENT 3: Memory Footprint")
        self.sink("="*70)

        item_count = self.config["memory_item_count"]
        interval = self.config["monitor_interval_s"]
        self.sink(f"   Building {item_count:,} list items...")

        gc.collect()
        try:
            with SystemMonitor(interval=interval) as monitor:
                items = build_list_items(item_count)
                # Hold the items long enough for a few background samples
                time.sleep(interval * 3)
                held = len(items)
                del items
                gc.collect()
        except psutil.Error as e:
            self.sink(f"   ✗ Memory monitoring failed: {e}")
            return ExperimentResult("memory", 3, pd.DataFrame(), {"error": str(e)})

        metrics = monitor.get_stats()
        self.raw_samples = monitor.get_raw_samples()
        log_memory_results(self.config["platform_label"], held, metrics, self.sink)

        memory_bytes = self.raw_samples["memory_bytes"]
        df = pd.DataFrame({
            "Sample": list(range(1, len(memory_bytes) + 1)),
            "Elapsed (s)": self.raw_samples["elapsed_s"],
            "RSS (MB)": [b / (1024 * 1024) for b in memory_bytes],
            "CPU (%)": self.raw_samples["cpu_percent"],
        })

        metadata = {
            "item_count": held,
            "memory_metrics": metrics,
            "baseline_rss_mb": metrics.baseline_rss_mb,
            "peak_rss_mb": metrics.peak_rss_mb,
            "final_rss_mb": metrics.final_rss_mb,
            "growth_mb": metrics.growth_mb,
            "avg_cpu_percent": metrics.avg_cpu_percent,
            "samples": [MeasurementSample(TestKind.MEMORY, {
                "baseline_rss_mb": metrics.baseline_rss_mb,
                "peak_rss_mb": metrics.peak_rss_mb,
                "final_rss_mb": metrics.final_rss_mb,
            })],
        }

        return ExperimentResult("memory", 3, df, metadata)


def main():
    """CLI entry point for Experiment 3."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Experiment 3: Memory Footprint",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--items", type=int, default=None, help="Number of list items to build")

    args = parser.parse_args()

    config = CONFIG.copy()
    if args.items:
        config["memory_item_count"] = args.items

    experiment = Experiment3Memory(config)
    result = experiment.run()

    if not result.data.empty:
        output_path = "exp3_memory_timeline.csv"
        result.data.to_csv(output_path, index=False)
        print(f"\n   ✓ Results saved to: {output_path}")

    return result


if __name__ == "__main__":
    main()
