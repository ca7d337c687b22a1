"""
Statistics helpers for aggregating repeated benchmark runs.

All functions are pure: they never mutate their input, and an empty
sequence yields 0 instead of raising.
"""

from datetime import datetime
from typing import Sequence

import numpy as np

from .data_classes import AggregateStats


def mean(values: Sequence[int]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def minimum(values: Sequence[int]) -> int:
    if len(values) == 0:
        return 0
    return int(np.min(values))


def maximum(values: Sequence[int]) -> int:
    if len(values) == 0:
        return 0
    return int(np.max(values))


def standard_deviation(values: Sequence[int]) -> float:
    """Population standard deviation; 0 for fewer than two samples."""
    if len(values) < 2:
        return 0.0
    return float(np.std(values, ddof=0))


def aggregate(values: Sequence[int]) -> AggregateStats:
    """Compute mean, min, max and standard deviation in one pass."""
    return AggregateStats(
        mean=mean(values),
        min=minimum(values),
        max=maximum(values),
        std_dev=standard_deviation(values),
        count=len(values),
    )


def format_microseconds(microseconds: float) -> str:
    """45230 -> '45.23 ms'"""
    return f"{microseconds / 1000:.2f} ms"


def format_microseconds_short(microseconds: float) -> str:
    """45230 -> '45.2ms'"""
    return f"{microseconds / 1000:.1f}ms"


def format_time(time: datetime) -> str:
    return time.strftime("%H:%M:%S")
