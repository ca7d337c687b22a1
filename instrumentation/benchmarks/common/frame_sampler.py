"""
Frame interval sampler - FPS and jank measurement.

State machine: idle -> sampling -> idle.

Each tick delivers a monotonic timestamp (μs). The first tick of a window
only seeds the previous timestamp; every later tick produces one interval.
An interval longer than `jank_multiplier` x the nominal frame budget
(1.5 x 16,667 μs = 25,000 μs by default) counts as a dropped frame. The
raw budget is not used as the threshold because ordinary compositor jitter
would be flagged as jank.

Throughput is total frames / elapsed wall-clock seconds, not 1 / mean
interval, so a few outlier intervals do not dominate the result.
"""

from typing import Callable, List, Optional

from .capabilities import monotonic_microseconds
from .data_classes import FrameWindowStats
from .tick_source import TickSource, TickSubscription


class FrameIntervalSampler:
    """
    Collects frame intervals from a tick source during one window.

    Usage:
        sampler = FrameIntervalSampler(tick_source)
        sampler.start()
        # ... ticks are delivered while the window is driven externally ...
        stats = sampler.stop()

    `start()` while sampling and `stop()` while idle are no-ops.
    """

    def __init__(
        self,
        tick_source: TickSource,
        clock: Callable[[], int] = monotonic_microseconds,
        frame_budget_us: int = 16667,
        jank_multiplier: float = 1.5,
        on_jank: Optional[Callable[[int], None]] = None
    ):
        if frame_budget_us <= 0:
            raise ValueError(f"Frame budget must be positive, got {frame_budget_us}")
        if jank_multiplier < 1:
            raise ValueError(f"Jank multiplier must be >= 1, got {jank_multiplier}")

        self.tick_source = tick_source
        self.clock = clock
        self.frame_budget_us = frame_budget_us
        self.jank_multiplier = jank_multiplier
        self.jank_threshold_us = int(frame_budget_us * jank_multiplier)
        self.on_jank = on_jank

        self._sampling = False
        self._subscription: Optional[TickSubscription] = None
        self._previous_timestamp: Optional[int] = None
        self._start_us = 0
        self._end_us = 0
        self._last_stats: Optional[FrameWindowStats] = None

        self.intervals: List[int] = []
        self.total_frame_count = 0
        self.dropped_frame_count = 0
        self.max_interval_us = 0

    @property
    def is_sampling(self) -> bool:
        return self._sampling

    @property
    def last_stats(self) -> Optional[FrameWindowStats]:
        return self._last_stats

    def start(self) -> None:
        """Begin a new sampling window."""
        if self._sampling:
            return

        self.intervals = []
        self.total_frame_count = 0
        self.dropped_frame_count = 0
        self.max_interval_us = 0
        self._previous_timestamp = None
        self._last_stats = None

        self._sampling = True
        self._start_us = self.clock()
        self._subscription = self.tick_source.subscribe(self.on_tick)

    def on_tick(self, timestamp_us: int) -> None:
        """Process one frame notification."""
        # Ticks queued before stop() must not be counted
        if not self._sampling:
            return

        previous = self._previous_timestamp
        self._previous_timestamp = timestamp_us
        if previous is None:
            return

        interval = timestamp_us - previous
        self.intervals.append(interval)
        self.total_frame_count += 1

        if interval > self.jank_threshold_us:
            self.dropped_frame_count += 1
            if self.on_jank is not None:
                self.on_jank(interval)

        if interval > self.max_interval_us:
            self.max_interval_us = interval

    def stop(self) -> Optional[FrameWindowStats]:
        """
        End the window and finalize its statistics.

        Returns:
            FrameWindowStats for the window, or the previous window's stats
            (None if there was none) when called while idle.
        """
        if not self._sampling:
            return self._last_stats

        self._sampling = False
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        self._end_us = self.clock()

        self._last_stats = self._compute_stats()
        return self._last_stats

    @property
    def average_interval_us(self) -> float:
        if not self.intervals:
            return 0.0
        return sum(self.intervals) / len(self.intervals)

    @property
    def jank_rate(self) -> float:
        if self.total_frame_count <= 0:
            return 0.0
        return self.dropped_frame_count / self.total_frame_count * 100

    def _compute_stats(self) -> FrameWindowStats:
        elapsed_us = self._end_us - self._start_us
        if elapsed_us > 0 and self.total_frame_count > 0:
            actual_fps = self.total_frame_count / (elapsed_us / 1000000)
        else:
            actual_fps = 0.0

        return FrameWindowStats(
            total_frame_count=self.total_frame_count,
            dropped_frame_count=self.dropped_frame_count,
            average_interval_us=self.average_interval_us,
            max_interval_us=self.max_interval_us,
            elapsed_us=elapsed_us,
            actual_fps=actual_fps,
            jank_rate=self.jank_rate,
        )
