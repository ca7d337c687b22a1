"""
Startup latency (time to interactive) recording.

A `StartupContext` is created by whoever composes the top-level runner and
passed down explicitly. It captures the init timestamp at construction and
accepts exactly one first-frame commit; later commits are no-ops.

Two capture points are available and they are NOT equivalent:

- "entry": `StartupContext.capture()` called as the first statement of the
  entry point. Excludes interpreter start-up and module imports.
- "process_start": `StartupContext.from_process_start()` uses the OS
  process creation time. Includes interpreter start-up and imports.
"""

from typing import Callable, Optional

import psutil

from .capabilities import epoch_microseconds
from .data_classes import StartupResult
from .reporting import log_startup


class StartupContext:
    """
    Single-write startup metrics.

    Usage:
        startup = StartupContext.capture(capture_point="entry")
        # ... build and show the first screen ...
        result = startup.record_first_frame()
    """

    def __init__(
        self,
        init_timestamp_us: int,
        capture_point: str,
        clock: Callable[[], int] = epoch_microseconds,
        platform_label: str = "PYTHON",
        sink: Callable[[str], None] = print
    ):
        self.init_timestamp_us = init_timestamp_us
        self.capture_point = capture_point
        self.clock = clock
        self.platform_label = platform_label
        self.sink = sink
        self._result: Optional[StartupResult] = None

    @classmethod
    def capture(
        cls,
        clock: Callable[[], int] = epoch_microseconds,
        capture_point: str = "entry",
        **kwargs
    ) -> "StartupContext":
        """Capture the init timestamp now."""
        return cls(clock(), capture_point, clock=clock, **kwargs)

    @classmethod
    def from_process_start(cls, **kwargs) -> "StartupContext":
        """Use the OS process creation time as the init timestamp."""
        created_s = psutil.Process().create_time()
        return cls(int(created_s * 1000000), "process_start", clock=epoch_microseconds, **kwargs)

    @property
    def has_first_frame(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[StartupResult]:
        return self._result

    @property
    def tti_us(self) -> Optional[int]:
        return self._result.tti_us if self._result is not None else None

    def record_first_frame(self) -> StartupResult:
        """Commit the first-frame timestamp. Only the first call is honored."""
        if self._result is not None:
            return self._result

        first_frame_us = self.clock()
        self._result = StartupResult(
            init_timestamp_us=self.init_timestamp_us,
            first_frame_timestamp_us=first_frame_us,
            tti_us=first_frame_us - self.init_timestamp_us,
            capture_point=self.capture_point,
        )
        log_startup(self.platform_label, self._result, self.sink)
        return self._result
