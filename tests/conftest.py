"""Shared pytest configuration and fixtures for the benchmark test suite."""

import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from instrumentation.benchmarks.common import (  # noqa: E402
    CONFIG,
    ManualTickSource,
    PlatformCapabilities,
    monotonic_microseconds,
)


class CapturingSink:
    """Log sink that records every line instead of printing it."""

    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ScriptedClock:
    """Monotonic μs clock that returns queued values, then repeats the last."""

    def __init__(self, *values: int):
        self._values = list(values)
        self._last = 0

    def push(self, *values: int) -> None:
        self._values.extend(values)

    def __call__(self) -> int:
        if self._values:
            self._last = self._values.pop(0)
        return self._last


class RealClockPlatform(PlatformCapabilities):
    """Real monotonic clock with scripted battery readings."""

    def __init__(self, *battery_levels: Optional[int]):
        self._levels = list(battery_levels)

    def now(self) -> int:
        return monotonic_microseconds()

    def battery_percent(self) -> Optional[int]:
        return self._levels.pop(0) if self._levels else None


@pytest.fixture()
def sink():
    return CapturingSink()


@pytest.fixture()
def ticks():
    return ManualTickSource()


@pytest.fixture()
def clock():
    return ScriptedClock()


@pytest.fixture()
def small_config():
    config = CONFIG.copy()
    config.update({
        "platform_label": "TEST",
        "sieve_prime_limit": 10000,
        "expected_prime_count": 1229,
        "cpu_runs": 3,
        "scroll_duration_seconds": 0.3,
        "gpu_test_item_count": 50,
        "memory_item_count": 50,
        "monitor_interval_s": 0.01,
    })
    return config
