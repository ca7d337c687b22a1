#!/usr/bin/env python3
"""
===================================================================================
UI-Thread Responsiveness Benchmark Suite - CLI Runner
===================================================================================

Runs the five micro-benchmarks of the mobile reference apps on the host:
prime sieve CPU time, scrolling FPS/jank, memory footprint, battery drain and
startup-to-first-frame latency. Results are printed as framed console blocks
in the same format the reference apps log, so the logs can be compared
line by line.

Experiments:
    1. CPU - Sieve of Eratosthenes up to 1,000,000 on the calling thread
    2. Scroll - FPS, jank and battery drain over a fixed scroll window
    3. Memory - RSS growth while a synthetic list is held
    4. Startup - Time to interactive from a labelled capture point

Usage:
    # Run full suite
    python -m instrumentation.benchmarks.run

    # Quick mode (~10 s)
    python -m instrumentation.benchmarks.run --quick

    # Run specific experiments
    python -m instrumentation.benchmarks.run --exp 1 2

    # Measure startup from process creation instead of main()
    python -m instrumentation.benchmarks.run --startup-from-process

Environment Variables:
    BENCHMARK_PLATFORM: Label used in the console blocks (default: PYTHON)
"""

import os
import argparse
from typing import List, Optional

from .common import CONFIG, StartupContext, get_quick_config
from .suite import BenchmarkSuite


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="UI-Thread Responsiveness Benchmark Suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py                      # Run all experiments (full mode)
  python run.py --quick              # Quick mode (~10 s)
  python run.py --exp 1              # Run only experiment 1
  python run.py --exp 1 2 --no-plots # Run experiments 1 and 2, skip plotting
  python run.py --duration 10        # 10 s scroll window

Experiments:
  1 - CPU: Sieve of Eratosthenes execution time
  2 - Scroll: FPS, jank and battery drain
  3 - Memory: RSS growth
  4 - Startup: Time to interactive
        """
    )

    parser.add_argument(
        "--quick",
        action="store_true",
        help="Quick mode with fewer runs and a shorter scroll window"
    )

    parser.add_argument(
        "--exp",
        nargs="+",
        type=int,
        choices=[1, 2, 3, 4],
        help="Specific experiment(s) to run (1-4). Default: run all"
    )

    parser.add_argument(
        "--output",
        type=str,
        default="output",
        help="Output directory for plots and CSV (default: output/)"
    )

    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip generating visualization plots"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available experiments and exit"
    )

    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Scroll window length in seconds (default: 30, quick: 5)"
    )

    parser.add_argument(
        "--platform",
        type=str,
        default=None,
        help="Platform label for the console blocks (default: PYTHON)"
    )

    parser.add_argument(
        "--startup-from-process",
        action="store_true",
        help="Measure startup from OS process creation instead of main() entry"
    )

    return parser.parse_args(argv)


def list_experiments():
    """Print list of available experiments."""
    print("\n" + "="*70)
    print("AVAILABLE EXPERIMENTS")
    print("="*70)
    print("""
Experiment 1: CPU Efficiency (Sieve of Eratosthenes)
    - Times a sieve up to 1,000,000 on the calling thread, keeps the last 10 runs
    - Use: python -m instrumentation.benchmarks.experiments.exp1_cpu

Experiment 2: Scrolling FPS / Jank and Battery Drain
    - Frame ticker on an asyncio loop, dropped frame = interval > 25 ms
    - Use: python -m instrumentation.benchmarks.experiments.exp2_scroll

Experiment 3: Memory Footprint
    - RSS baseline, peak and final while a synthetic list is held
    - Use: python -m instrumentation.benchmarks.experiments.exp3_memory

Experiment 4: Startup Time (Time to Interactive)
    - Init capture point to the suite's first printed frame
    - Use: python -m instrumentation.benchmarks.experiments.exp4_startup

Run all: python -m instrumentation.benchmarks.run
""")


def main(argv: Optional[List[str]] = None):
    """Main entry point for the benchmark suite CLI."""
    # Earliest capture point under our control
    startup = StartupContext.capture(capture_point="entry")

    args = parse_args(argv)

    if args.list:
        list_experiments()
        return

    # Select configuration
    if args.quick:
        config = get_quick_config()
        print("🚀 Running in QUICK mode (~10 s)")
    else:
        config = CONFIG.copy()
        print("🚀 Running in FULL mode")

    if args.duration:
        config["scroll_duration_seconds"] = args.duration
    if args.platform:
        config["platform_label"] = args.platform

    if args.startup_from_process:
        startup = StartupContext.from_process_start(platform_label=config["platform_label"])
    else:
        startup.platform_label = config["platform_label"]

    # Create output directory if needed
    if not os.path.exists(args.output):
        os.makedirs(args.output)

    suite = BenchmarkSuite(config, startup=startup)

    if args.exp:
        suite.print_banner()
        print(f"   Running experiments: {args.exp}")
        suite.run_experiments(args.exp)

        if not args.no_plots:
            suite.generate_plots(args.output)

        csv_path = os.path.join(args.output, config.get("output_csv", "results.csv"))
        suite.save_results(csv_path)

        print("\n" + "="*70)
        print("📊 EXPERIMENTS COMPLETE")
        print("="*70)
    else:
        suite.run_all(args.output, plots=not args.no_plots)


if __name__ == "__main__":
    main()
