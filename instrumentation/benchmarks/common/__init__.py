"""
Common measurement core and data structures for the benchmarks.
"""

from .config import CONFIG, get_quick_config
from .data_classes import (
    TestKind,
    MeasurementSample,
    AggregateStats,
    CPUTestResult,
    FrameWindowStats,
    FrameTestResult,
    StartupResult,
    MemoryMetrics,
    ExperimentResult,
)
from .capabilities import (
    PlatformCapabilities,
    HostPlatform,
    FixedPlatform,
    monotonic_microseconds,
    epoch_microseconds,
)
from .sieve import count_primes, time_prime_count
from .statistics_utils import (
    mean,
    minimum,
    maximum,
    standard_deviation,
    aggregate,
    format_microseconds,
    format_microseconds_short,
    format_time,
)
from .history import ResultHistory
from .tick_source import (
    TickSource,
    TickSubscription,
    ManualTickSource,
    AsyncioTickSource,
)
from .frame_sampler import FrameIntervalSampler
from .battery import BatterySampler, battery_delta
from .startup import StartupContext
from .system_monitor import SystemMonitor
from .reporting import (
    SEPARATOR,
    log_cpu_result,
    log_frame_test_started,
    log_frame_test_results,
    log_jank,
    log_startup,
    log_memory_results,
)

__all__ = [
    # Config
    "CONFIG",
    "get_quick_config",
    # Data classes
    "TestKind",
    "MeasurementSample",
    "AggregateStats",
    "CPUTestResult",
    "FrameWindowStats",
    "FrameTestResult",
    "StartupResult",
    "MemoryMetrics",
    "ExperimentResult",
    # Platform capabilities
    "PlatformCapabilities",
    "HostPlatform",
    "FixedPlatform",
    "monotonic_microseconds",
    "epoch_microseconds",
    # Samplers
    "count_primes",
    "time_prime_count",
    "FrameIntervalSampler",
    "BatterySampler",
    "battery_delta",
    "StartupContext",
    "SystemMonitor",
    # Tick sources
    "TickSource",
    "TickSubscription",
    "ManualTickSource",
    "AsyncioTickSource",
    # Statistics
    "mean",
    "minimum",
    "maximum",
    "standard_deviation",
    "aggregate",
    "format_microseconds",
    "format_microseconds_short",
    "format_time",
    "ResultHistory",
    # Console reports
    "SEPARATOR",
    "log_cpu_result",
    "log_frame_test_started",
    "log_frame_test_results",
    "log_jank",
    "log_startup",
    "log_memory_results",
]
