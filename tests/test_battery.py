from collections import namedtuple

import psutil

from instrumentation.benchmarks.common import (
    BatterySampler,
    FixedPlatform,
    HostPlatform,
    battery_delta,
)

FakeBattery = namedtuple("FakeBattery", ["percent", "secsleft", "power_plugged"])


def test_delta_of_two_readings():
    assert battery_delta(80, 79) == "1%"


def test_delta_can_be_negative_while_charging():
    assert battery_delta(50, 52) == "-2%"


def test_delta_with_unavailable_reading():
    assert battery_delta(None, 79) == "N/A"
    assert battery_delta(80, None) == "N/A"
    assert battery_delta(None, None) == "N/A"


def test_capture_window_reads_before_and_after():
    sampler = BatterySampler(FixedPlatform(battery_levels=[80, 79]))

    with sampler.capture_window():
        assert sampler.start == 80
        assert sampler.end is None

    assert sampler.end == 79
    assert sampler.drain == "1%"


def test_host_platform_without_battery_is_unavailable(monkeypatch):
    monkeypatch.setattr(psutil, "sensors_battery", lambda: None, raising=False)

    assert HostPlatform(sink=lambda line: None).battery_percent() is None


def test_host_platform_rounds_percent(monkeypatch):
    monkeypatch.setattr(psutil, "sensors_battery",
                        lambda: FakeBattery(79.6, 3600, False), raising=False)

    assert HostPlatform(sink=lambda line: None).battery_percent() == 80


def test_host_platform_rejects_out_of_range(monkeypatch):
    monkeypatch.setattr(psutil, "sensors_battery",
                        lambda: FakeBattery(-1, 0, False), raising=False)

    assert HostPlatform(sink=lambda line: None).battery_percent() is None


def test_host_platform_reports_platform_errors(monkeypatch, sink):
    def broken():
        raise NotImplementedError("no battery sensor")

    monkeypatch.setattr(psutil, "sensors_battery", broken, raising=False)

    assert HostPlatform(sink=sink).battery_percent() is None
    assert sink.lines == ["Battery level not available: no battery sensor"]
