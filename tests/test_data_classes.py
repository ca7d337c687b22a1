import dataclasses
from datetime import datetime

import pytest

from instrumentation.benchmarks.common import (
    CPUTestResult,
    FrameTestResult,
    MeasurementSample,
    MemoryMetrics,
    StartupResult,
    TestKind,
    battery_delta,
)


def test_measurement_sample_is_immutable():
    values = {"execution_time_us": 45230}
    sample = MeasurementSample(TestKind.CPU, values, datetime(2024, 1, 1))

    values["execution_time_us"] = 0

    assert sample.values["execution_time_us"] == 45230
    with pytest.raises(TypeError):
        sample.values["execution_time_us"] = 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample.kind = TestKind.FRAME


def test_measurement_sample_to_dict():
    sample = MeasurementSample(TestKind.STARTUP, {"tti_us": 1200}, datetime(2024, 1, 1, 12, 0, 0))

    assert sample.to_dict() == {"kind": "startup", "timestamp": "2024-01-01T12:00:00", "tti_us": 1200}


def test_cpu_result_derived_values():
    result = CPUTestResult(execution_time_us=45230, prime_count=78498)

    assert result.execution_time_ms == pytest.approx(45.23)
    assert result.formatted_time == "45.23 ms"
    assert result.is_valid
    assert not CPUTestResult(execution_time_us=1, prime_count=78497).is_valid
    assert result.to_sample().kind is TestKind.CPU


def _frame_result(**overrides):
    fields = dict(
        total_frame_count=200,
        dropped_frame_count=4,
        average_frame_time_us=20000.0,
        max_frame_time_us=40000,
        elapsed_us=4000000,
        actual_fps=50.0,
    )
    fields.update(overrides)
    return FrameTestResult(**fields)


def test_frame_result_verdicts():
    result = _frame_result()

    assert result.jank_percentage == pytest.approx(2.0)
    assert result.estimated_fps == pytest.approx(50.0)
    assert result.average_frame_time_ms == pytest.approx(20.0)
    assert result.max_frame_time_ms == pytest.approx(40.0)
    assert not result.is_good_performance
    assert result.is_acceptable_jank
    assert result.battery_drain == "N/A"


def test_frame_result_without_frames():
    result = _frame_result(total_frame_count=0, dropped_frame_count=0,
                           average_frame_time_us=0.0, actual_fps=0.0)

    assert result.jank_percentage == 0
    assert result.estimated_fps == 0


def test_frame_result_battery_drain():
    assert _frame_result(battery_start=80, battery_end=79).battery_drain == "1%"


@pytest.mark.parametrize("start, end", [(80, 79), (79, 80), (None, 79), (80, None)])
def test_frame_result_drain_matches_battery_delta(start, end):
    assert _frame_result(battery_start=start, battery_end=end).battery_drain == battery_delta(start, end)


def test_startup_and_memory_derived_values():
    startup = StartupResult(1000, 46230, 45230, "entry")
    memory = MemoryMetrics(100.0, 120.5, 101.0, 10.0, 5)

    assert startup.tti_ms == pytest.approx(45.23)
    assert startup.to_sample().values["tti_us"] == 45230
    assert memory.growth_mb == pytest.approx(20.5)
