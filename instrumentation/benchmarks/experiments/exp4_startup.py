#!/usr/bin/env python3
"""
===================================================================================
Experiment 4: Startup Time (Time to Interactive)
===================================================================================

Reports the time from a labelled init capture point to the first "frame",
which for the suite is the moment its banner is printed.

The capture point is explicit because different choices are not
comparable: "entry" starts the clock in the runner's main(), after the
interpreter and imports are loaded; "process_start" starts it at the OS
process creation time and includes both.

Usage:
    python -m instrumentation.benchmarks.experiments.exp4_startup
    python -m instrumentation.benchmarks.experiments.exp4_startup --from-process
"""

from typing import Dict, Any, Callable, Optional

import pandas as pd

from ..common import CONFIG, ExperimentResult, StartupContext


class Experiment4Startup:
    """
    Experiment 4: Report the startup latency held by a StartupContext.

    If the context has no first frame yet, the first frame is recorded now.
    """

    def __init__(
        self,
        config: Dict[str, Any] = None,
        startup: Optional[StartupContext] = None,
        sink: Callable[[str], None] = print
    ):
        """Initialize the experiment with configuration."""
        self.config = config or CONFIG
        self.sink = sink
        self.startup = startup or StartupContext.capture(
            platform_label=self.config["platform_label"],
            sink=sink,
        )

    def run(self) -> ExperimentResult:
        """
        Run the startup experiment.

        Returns:
            ExperimentResult with a single TTI row
        """
        self.sink("\n" + "="*70)
        self.sink("EXPERIMENT 4: Startup Time (Time to Interactive)")
        self.sink("="*70)

        if not self.startup.has_first_frame:
            self.sink("   First frame not recorded yet, recording now...")
        result = self.startup.record_first_frame()

        df = pd.DataFrame({
            "Capture Point": [result.capture_point],
            "Init (us)": [result.init_timestamp_us],
            "First Frame (us)": [result.first_frame_timestamp_us],
            "TTI (us)": [result.tti_us],
            "TTI (ms)": [result.tti_ms],
        })

        self.sink(f"\n   Startup Time: {result.tti_ms:.2f} ms (from {result.capture_point})")

        metadata = {
            "startup_result": result,
            "capture_point": result.capture_point,
            "tti_us": result.tti_us,
            "tti_ms": result.tti_ms,
            "samples": [result.to_sample()],
        }

        return ExperimentResult("startup", 4, df, metadata)


def main():
    """CLI entry point for Experiment 4."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Experiment 4: Startup Time (Time to Interactive)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--from-process", action="store_true",
                        help="Measure from OS process creation instead of main() entry")

    args = parser.parse_args()

    config = CONFIG.copy()
    if args.from_process:
        startup = StartupContext.from_process_start(platform_label=config["platform_label"])
    else:
        startup = StartupContext.capture(platform_label=config["platform_label"])

    experiment = Experiment4Startup(config, startup=startup)
    return experiment.run()


if __name__ == "__main__":
    main()
