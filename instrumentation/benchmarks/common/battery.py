"""
Battery drain sampling.

Single point-in-time reads before and after a fixed-duration window.
An unavailable reading is None, never an exception, and is rendered as N/A.
"""

from typing import Optional

from .capabilities import PlatformCapabilities, HostPlatform


def battery_delta(start: Optional[int], end: Optional[int]) -> str:
    """Signed drain between two readings, e.g. battery_delta(80, 79) -> '1%'."""
    if start is not None and end is not None:
        return f"{start - end}%"
    return "N/A"


class BatterySampler:
    """
    Reads the battery level around a test window.

    Usage:
        sampler = BatterySampler(platform)
        with sampler.capture_window():
            # ... run workload ...
        print(sampler.drain)
    """

    def __init__(self, platform: Optional[PlatformCapabilities] = None):
        self.platform = platform or HostPlatform()
        self.start: Optional[int] = None
        self.end: Optional[int] = None

    def read(self) -> Optional[int]:
        return self.platform.battery_percent()

    def capture_window(self) -> "BatterySampler":
        return self

    def __enter__(self) -> "BatterySampler":
        self.start = self.read()
        self.end = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end = self.read()

    @property
    def drain(self) -> str:
        return battery_delta(self.start, self.end)
