"""
Data classes for benchmark results and metrics.

These classes provide structured containers for storing and passing
benchmark results between the samplers, the experiments and the suite.
Per-run results are frozen: they are created when a run completes and
never mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional

import pandas as pd

from .battery import battery_delta


class TestKind(Enum):
    """Kind of benchmark a measurement sample belongs to."""
    __test__ = False  # Not a pytest test class

    CPU = "cpu"
    FRAME = "frame"
    BATTERY = "battery"
    STARTUP = "startup"
    MEMORY = "memory"


@dataclass(frozen=True)
class MeasurementSample:
    """Immutable record of one completed test run."""
    kind: TestKind
    values: Mapping[str, float]
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        # Freeze the mapping so callers cannot mutate a recorded sample
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def to_dict(self) -> Dict[str, Any]:
        row = {"kind": self.kind.value, "timestamp": self.timestamp.isoformat()}
        row.update(self.values)
        return row


@dataclass(frozen=True)
class AggregateStats:
    """Mean/min/max/std over a sample set. Derived, never stored."""
    mean: float
    min: int
    max: int
    std_dev: float
    count: int


@dataclass(frozen=True)
class CPUTestResult:
    """Result of one Sieve of Eratosthenes run."""
    execution_time_us: int
    prime_count: int
    timestamp: datetime = field(default_factory=datetime.now)
    expected_prime_count: int = 78498

    @property
    def execution_time_ms(self) -> float:
        return self.execution_time_us / 1000

    @property
    def formatted_time(self) -> str:
        return f"{self.execution_time_ms:.2f} ms"

    @property
    def is_valid(self) -> bool:
        """True if the sieve returned the known prime count for its limit."""
        return self.prime_count == self.expected_prime_count

    def to_sample(self) -> MeasurementSample:
        return MeasurementSample(
            TestKind.CPU,
            {"execution_time_us": self.execution_time_us, "prime_count": self.prime_count},
            self.timestamp,
        )


@dataclass(frozen=True)
class FrameWindowStats:
    """Aggregate statistics of one frame sampling window."""
    total_frame_count: int
    dropped_frame_count: int
    average_interval_us: float
    max_interval_us: int
    elapsed_us: int
    actual_fps: float
    jank_rate: float


@dataclass(frozen=True)
class FrameTestResult:
    """Stores results of a scroll/FPS test window, battery included."""
    total_frame_count: int
    dropped_frame_count: int
    average_frame_time_us: float
    max_frame_time_us: int
    elapsed_us: int
    actual_fps: float
    battery_start: Optional[int] = None
    battery_end: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)
    good_fps_threshold: float = 55.0
    jank_percentage_threshold: float = 5.0

    @property
    def jank_percentage(self) -> float:
        if self.total_frame_count <= 0:
            return 0.0
        return self.dropped_frame_count / self.total_frame_count * 100

    @property
    def estimated_fps(self) -> float:
        """1 / mean interval. Informational only; biased by outliers."""
        return 1000000 / self.average_frame_time_us if self.average_frame_time_us > 0 else 0.0

    @property
    def average_frame_time_ms(self) -> float:
        return self.average_frame_time_us / 1000

    @property
    def max_frame_time_ms(self) -> float:
        return self.max_frame_time_us / 1000

    @property
    def battery_drain(self) -> str:
        return battery_delta(self.battery_start, self.battery_end)

    @property
    def is_good_performance(self) -> bool:
        return self.actual_fps >= self.good_fps_threshold

    @property
    def is_acceptable_jank(self) -> bool:
        return self.jank_percentage < self.jank_percentage_threshold

    def to_sample(self) -> MeasurementSample:
        return MeasurementSample(
            TestKind.FRAME,
            {
                "total_frame_count": self.total_frame_count,
                "dropped_frame_count": self.dropped_frame_count,
                "average_frame_time_us": self.average_frame_time_us,
                "max_frame_time_us": self.max_frame_time_us,
                "actual_fps": self.actual_fps,
            },
            self.timestamp,
        )


@dataclass(frozen=True)
class StartupResult:
    """Time-to-interactive measured from a labelled capture point."""
    init_timestamp_us: int
    first_frame_timestamp_us: int
    tti_us: int
    capture_point: str

    @property
    def tti_ms(self) -> float:
        return self.tti_us / 1000

    def to_sample(self) -> MeasurementSample:
        return MeasurementSample(TestKind.STARTUP, {"tti_us": self.tti_us})


@dataclass
class MemoryMetrics:
    """Container for process memory footprint metrics."""
    baseline_rss_mb: float  # RSS when monitoring started
    peak_rss_mb: float  # Maximum RSS observed
    final_rss_mb: float  # Last RSS sample
    avg_cpu_percent: float  # Average process CPU utilization %
    sample_count: int  # Number of samples taken

    @property
    def growth_mb(self) -> float:
        return self.peak_rss_mb - self.baseline_rss_mb


@dataclass
class ExperimentResult:
    """Container for experiment results."""
    experiment_name: str
    experiment_id: int
    data: pd.DataFrame
    metadata: Dict[str, Any] = field(default_factory=dict)
