"""
===================================================================================
UI-Thread Responsiveness Benchmark Suite
===================================================================================

Host-side rendition of the five micro-benchmarks run by the mobile reference
apps. The measurement methodology is the point: how elapsed time, frame
intervals and battery deltas are captured, how the jank threshold is applied,
and how repeated runs are aggregated.

Everything measured runs on ONE thread. The frame ticker is an asyncio event
loop standing in for the UI thread, so CPU work on that thread shows up as
late frames, exactly like a blocked main thread on a phone.

Experiments:
    1. CPU Efficiency (Sieve of Eratosthenes)
    2. Scrolling FPS / Jank and Battery Drain
    3. Memory Footprint
    4. Startup Time (Time to Interactive)

Quick Start:
    from instrumentation.benchmarks import BenchmarkSuite, StartupContext

    startup = StartupContext.capture()
    suite = BenchmarkSuite(startup=startup)
    suite.run_all()

Measurement core:
    from instrumentation.benchmarks import FrameIntervalSampler, ManualTickSource

    ticks = ManualTickSource()
    sampler = FrameIntervalSampler(ticks)
    sampler.start()
    ticks.emit_many([0, 16667, 33334])
    stats = sampler.stop()

CLI Usage:
    python -m instrumentation.benchmarks.run              # Full suite
    python -m instrumentation.benchmarks.run --quick      # Quick mode
    python -m instrumentation.benchmarks.run --exp 1 2    # Specific experiments
    python -m instrumentation.benchmarks.run --list       # List experiments
"""

from .common import (
    CONFIG,
    get_quick_config,
    ExperimentResult,
    count_primes,
    FrameIntervalSampler,
    ManualTickSource,
    AsyncioTickSource,
    BatterySampler,
    battery_delta,
    StartupContext,
    ResultHistory,
    aggregate,
    standard_deviation,
)
from .suite import BenchmarkSuite
from .experiments import (
    Experiment1CPU,
    Experiment2Scroll,
    Experiment3Memory,
    Experiment4Startup,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "CONFIG",
    "get_quick_config",
    # Suite
    "BenchmarkSuite",
    # Experiments
    "Experiment1CPU",
    "Experiment2Scroll",
    "Experiment3Memory",
    "Experiment4Startup",
    # Measurement core
    "count_primes",
    "FrameIntervalSampler",
    "ManualTickSource",
    "AsyncioTickSource",
    "BatterySampler",
    "battery_delta",
    "StartupContext",
    "ResultHistory",
    "aggregate",
    "standard_deviation",
    # Data classes
    "ExperimentResult",
]
