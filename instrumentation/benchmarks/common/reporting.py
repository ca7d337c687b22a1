"""
Framed console reports.

The block layout is reproduced verbatim across implementations so logs
from different platforms can be compared line by line:

    ═══════════════════════════════════════════════
    <PLATFORM> BENCHMARK - CPU TEST RESULTS
    ═══════════════════════════════════════════════
    ...
    ═══════════════════════════════════════════════

One line differs from the mobile logs: the startup block
prints "Init (<capture point>) at:" instead of "Main() called at:", since
the init timestamp may come from main() entry or from process creation.
"""

from typing import Callable, List, Optional

from .data_classes import FrameTestResult, MemoryMetrics, StartupResult

SEPARATOR = "═" * 47

Sink = Callable[[str], None]


def _emit_block(platform_label: str, title: str, lines: List[str], sink: Sink) -> None:
    sink(SEPARATOR)
    sink(f"{platform_label} BENCHMARK - {title}")
    sink(SEPARATOR)
    for line in lines:
        sink(line)
    sink(SEPARATOR)


def _level(value: Optional[int]) -> str:
    return "N/A" if value is None else str(value)


def log_cpu_result(
    platform_label: str,
    limit: int,
    prime_count: int,
    execution_time_us: int,
    sink: Sink = print
) -> None:
    _emit_block(platform_label, "CPU TEST RESULTS", [
        "Algorithm: Sieve of Eratosthenes",
        f"Limit: {limit}",
        f"Primes found: {prime_count}",
        f"Execution time: {execution_time_us} μs",
        f"Execution time: {execution_time_us / 1000:.2f} ms",
    ], sink)


def log_frame_test_started(
    platform_label: str,
    item_count: int,
    duration_seconds: float,
    battery_start: Optional[int],
    sink: Sink = print
) -> None:
    _emit_block(platform_label, "GPU TEST STARTED", [
        f"Items: {item_count}",
        f"Duration: {duration_seconds:g} seconds",
        f"Battery at start: {_level(battery_start)}%",
    ], sink)


def log_frame_test_results(
    platform_label: str,
    result: FrameTestResult,
    jank_threshold_us: int,
    sink: Sink = print
) -> None:
    _emit_block(platform_label, "GPU TEST RESULTS", [
        f"Test duration: {result.elapsed_us / 1000000:.2f} seconds",
        f"Total frames rendered: {result.total_frame_count}",
        f"Janky frames (>{jank_threshold_us / 1000:g}ms): {result.dropped_frame_count}",
        f"Jank percentage: {result.jank_percentage:.1f}%",
        "",
        f"Avg frame interval: {result.average_frame_time_ms:.2f} ms",
        f"Max frame interval: {result.max_frame_time_ms:.2f} ms",
        f"Actual FPS (frames/elapsed): {result.actual_fps:.1f}",
        "",
        f"Battery at start: {_level(result.battery_start)}%",
        f"Battery at end: {_level(result.battery_end)}%",
        f"Battery drain: {result.battery_drain}",
    ], sink)


def log_jank(interval_us: int, sink: Sink = print) -> None:
    sink(f"Jank detected: Frame interval={interval_us / 1000:.2f}ms")


def log_startup(platform_label: str, result: StartupResult, sink: Sink = print) -> None:
    _emit_block(platform_label, "STARTUP TIME MEASUREMENT", [
        f"Init ({result.capture_point}) at: {result.init_timestamp_us} μs",
        f"First frame at: {result.first_frame_timestamp_us} μs",
        f"Time to Interactive (TTI): {result.tti_us} μs",
        f"Time to Interactive (TTI): {result.tti_us / 1000:.2f} ms",
    ], sink)


def log_memory_results(
    platform_label: str,
    item_count: int,
    metrics: MemoryMetrics,
    sink: Sink = print
) -> None:
    _emit_block(platform_label, "MEMORY TEST RESULTS", [
        f"Items: {item_count}",
        f"Baseline RSS: {metrics.baseline_rss_mb:.2f} MB",
        f"Peak RSS: {metrics.peak_rss_mb:.2f} MB",
        f"Final RSS: {metrics.final_rss_mb:.2f} MB",
        f"Growth: {metrics.growth_mb:.2f} MB",
        f"Samples: {metrics.sample_count}",
    ], sink)
