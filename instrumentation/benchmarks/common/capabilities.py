"""
Platform capability interface.

The measurement core only needs two things from the host: a monotonic
clock with microsecond resolution and an instantaneous battery reading.
Both are exposed through `PlatformCapabilities` so that tests and headless
runs can swap in scripted values.
"""

import time
from typing import Callable, Iterable, Iterator, Optional

import psutil


def monotonic_microseconds() -> int:
    """Monotonic timestamp in microseconds."""
    return time.perf_counter_ns() // 1000


def epoch_microseconds() -> int:
    """Wall-clock timestamp in microseconds since the Unix epoch."""
    return time.time_ns() // 1000


class PlatformCapabilities:
    """Narrow interface the samplers depend on."""

    def now(self) -> int:
        raise NotImplementedError

    def battery_percent(self) -> Optional[int]:
        raise NotImplementedError


class HostPlatform(PlatformCapabilities):
    """
    Capabilities of the machine running the suite.

    Battery level comes from `psutil.sensors_battery()`, which returns None
    on machines without a battery and is missing entirely on some platforms.
    """

    def __init__(self, sink: Callable[[str], None] = print):
        self.sink = sink

    def now(self) -> int:
        return monotonic_microseconds()

    def battery_percent(self) -> Optional[int]:
        try:
            battery = psutil.sensors_battery()
        except (AttributeError, NotImplementedError, OSError) as e:
            self.sink(f"Battery level not available: {e}")
            return None

        if battery is None:
            return None

        level = int(round(battery.percent))
        # Some platforms report -1 for "unknown"
        if level < 0 or level > 100:
            return None
        return level


class FixedPlatform(PlatformCapabilities):
    """
    Scripted capabilities for tests and replays.

    Args:
        timestamps: Values returned by successive now() calls. When exhausted,
            the last value is repeated.
        battery_levels: Values returned by successive battery_percent() calls.
            None entries model an unavailable reading.
    """

    def __init__(
        self,
        timestamps: Iterable[int] = (0,),
        battery_levels: Iterable[Optional[int]] = (None,)
    ):
        self._timestamps: Iterator[int] = iter(timestamps)
        self._battery_levels: Iterator[Optional[int]] = iter(battery_levels)
        self._last_timestamp = 0
        self._last_battery: Optional[int] = None

    def now(self) -> int:
        self._last_timestamp = next(self._timestamps, self._last_timestamp)
        return self._last_timestamp

    def battery_percent(self) -> Optional[int]:
        self._last_battery = next(self._battery_levels, self._last_battery)
        return self._last_battery
