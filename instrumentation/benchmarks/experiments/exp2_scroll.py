#!/usr/bin/env python3
"""
===================================================================================
Experiment 2: Scrolling FPS / Jank and Battery Drain
===================================================================================

Simulates the auto-scroll test of the reference apps: for a fixed window
(30 s by default) a frame ticker on an asyncio event loop "renders" a slice
of a synthetic list every frame while a frame interval sampler measures the
gaps between ticks.

Everything runs on ONE event loop. Anything that blocks the loop (the
optional sieve stall injection, a slow per-frame workload, GC pauses) delays
the next tick, and the gap is classified as a dropped frame when it exceeds
1.5 x the 16.67 ms frame budget (25 ms).

Methodology:
- Battery read once before and once after the window
- Actual FPS = total frames / elapsed wall-clock seconds
- Jank % = dropped frames / total frames x 100
- The window length is driven by the experiment (asyncio.sleep); the
  sampler only reacts to the ticks it receives

Usage:
    python -m instrumentation.benchmarks.experiments.exp2_scroll
    python -m instrumentation.benchmarks.experiments.exp2_scroll --duration 5
    python -m instrumentation.benchmarks.experiments.exp2_scroll --stall-every 1
"""

import asyncio
from datetime import datetime
from typing import Dict, Any, Callable, List, Optional

import pandas as pd

from ..common import (
    CONFIG,
    AsyncioTickSource,
    BatterySampler,
    ExperimentResult,
    FrameIntervalSampler,
    FrameTestResult,
    HostPlatform,
    MeasurementSample,
    PlatformCapabilities,
    TestKind,
    log_frame_test_results,
    log_frame_test_started,
    log_jank,
    time_prime_count,
)


class Experiment2Scroll:
    """
    Experiment 2: Frame pacing of a simulated scrolling list.

    The per-frame workload formats `frame_workload_items` list rows at the
    current scroll offset, a stand-in for laying out the visible cells.
    """

    def __init__(
        self,
        config: Dict[str, Any] = None,
        platform: Optional[PlatformCapabilities] = None,
        sink: Callable[[str], None] = print
    ):
        """Initialize the experiment with configuration."""
        self.config = config or CONFIG
        self.sink = sink
        self.platform = platform or HostPlatform(sink=sink)

        self.sampler: Optional[FrameIntervalSampler] = None
        self.scroll_offset = 0
        self.rendered_rows: List[str] = []
        self.stall_durations_us: List[int] = []

    # ------------------------------------------------------------------
    # Per-frame work
    # ------------------------------------------------------------------

    def _render_frame(self, timestamp_us: int) -> None:
        item_count = self.config["gpu_test_item_count"]
        visible = self.config["frame_workload_items"]
        self.rendered_rows = [
            f"Item #{(self.scroll_offset + i) % item_count:04d} | "
            f"{'★' * ((self.scroll_offset + i) % 5 + 1)} | t={timestamp_us}"
            for i in range(visible)
        ]
        self.scroll_offset = (self.scroll_offset + 1) % item_count

    async def _report_progress(self, duration_s: float) -> None:
        elapsed = 0
        while elapsed + 1 <= duration_s:
            await asyncio.sleep(1)
            elapsed += 1
            self.sink(f"   ⏱️  {elapsed} / {duration_s:g} s")

    async def _inject_stalls(self, every_s: float) -> None:
        # Blocks the loop on purpose so the ticker misses its deadlines
        while True:
            await asyncio.sleep(every_s)
            _, elapsed_us = time_prime_count(self.config["stall_prime_limit"], clock=self.platform.now)
            self.stall_durations_us.append(elapsed_us)

    # ------------------------------------------------------------------
    # Window
    # ------------------------------------------------------------------

    async def run_window(self) -> FrameTestResult:
        """Drive one fixed-duration scroll window on the running loop."""
        label = self.config["platform_label"]
        duration_s = self.config["scroll_duration_seconds"]
        stall_every = self.config.get("stall_interval_s")

        ticker = AsyncioTickSource(
            interval_s=self.config["target_frame_time_us"] / 1000000,
            clock=self.platform.now,
        )
        self.sampler = FrameIntervalSampler(
            ticker,
            clock=self.platform.now,
            frame_budget_us=self.config["target_frame_time_us"],
            jank_multiplier=self.config["jank_multiplier"],
            on_jank=lambda interval_us: log_jank(interval_us, self.sink),
        )
        self.scroll_offset = 0
        self.stall_durations_us = []
        battery = BatterySampler(self.platform)

        with battery.capture_window():
            log_frame_test_started(label, self.config["gpu_test_item_count"], duration_s,
                                   battery.start, self.sink)

            self.sampler.start()
            workload = ticker.subscribe(self._render_frame)
            tasks = [asyncio.create_task(self._report_progress(duration_s))]
            if stall_every:
                tasks.append(asyncio.create_task(self._inject_stalls(stall_every)))

            try:
                await asyncio.sleep(duration_s)
            finally:
                stats = self.sampler.stop()
                workload.cancel()
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)

        result = FrameTestResult(
            total_frame_count=stats.total_frame_count,
            dropped_frame_count=stats.dropped_frame_count,
            average_frame_time_us=stats.average_interval_us,
            max_frame_time_us=stats.max_interval_us,
            elapsed_us=stats.elapsed_us,
            actual_fps=stats.actual_fps,
            battery_start=battery.start,
            battery_end=battery.end,
            timestamp=datetime.now(),
            good_fps_threshold=self.config["good_fps_threshold"],
            jank_percentage_threshold=self.config["jank_percentage_threshold"],
        )
        log_frame_test_results(label, result, self.sampler.jank_threshold_us, self.sink)
        return result

    @staticmethod
    def _battery_sample(result: FrameTestResult) -> MeasurementSample:
        readings = {"battery_start": result.battery_start, "battery_end": result.battery_end}
        return MeasurementSample(
            TestKind.BATTERY,
            {name: level for name, level in readings.items() if level is not None},
            result.timestamp,
        )

    def run(self) -> ExperimentResult:
        """
        Run the scroll experiment.

        Returns:
            ExperimentResult with one row per frame interval
        """
        self.sink("\n" + "="*70)
        self.sink("EXPERIMENT 2: Scrolling FPS / Jank and Battery Drain")
        self.sink("="*70)

        result = asyncio.run(self.run_window())

        intervals = self.sampler.intervals
        threshold = self.sampler.jank_threshold_us
        df = pd.DataFrame({
            "Frame": list(range(1, len(intervals) + 1)),
            "Interval (us)": intervals,
            "Interval (ms)": [i / 1000 for i in intervals],
            "Dropped": [i > threshold for i in intervals],
        })

        verdict_fps = "✓ good" if result.is_good_performance else "✗ below target"
        verdict_jank = "✓ acceptable" if result.is_acceptable_jank else "✗ too high"
        self.sink(f"\n   FPS:  {result.actual_fps:.1f} ({verdict_fps}, "
                  f"target >= {result.good_fps_threshold:g})")
        self.sink(f"   Jank: {result.jank_percentage:.1f}% ({verdict_jank}, "
                  f"limit < {result.jank_percentage_threshold:g}%)")
        if self.stall_durations_us:
            self.sink(f"   Injected stalls: {len(self.stall_durations_us)}")

        metadata = {
            "frame_result": result,
            "frame_budget_us": self.sampler.frame_budget_us,
            "jank_threshold_us": threshold,
            "total_frames": result.total_frame_count,
            "dropped_frames": result.dropped_frame_count,
            "jank_percentage": result.jank_percentage,
            "actual_fps": result.actual_fps,
            "avg_frame_ms": result.average_frame_time_ms,
            "max_frame_ms": result.max_frame_time_ms,
            "battery_start": result.battery_start,
            "battery_end": result.battery_end,
            "battery_drain": result.battery_drain,
            "stall_durations_us": list(self.stall_durations_us),
            "samples": [result.to_sample(), self._battery_sample(result)],
        }

        return ExperimentResult("scroll", 2, df, metadata)


def main():
    """CLI entry point for Experiment 2."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Experiment 2: Scrolling FPS / Jank and Battery Drain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--duration", type=float, default=None, help="Scroll window in seconds")
    parser.add_argument("--stall-every", type=float, default=None,
                        help="Block the loop with a sieve every N seconds")

    args = parser.parse_args()

    config = CONFIG.copy()
    if args.duration:
        config["scroll_duration_seconds"] = args.duration
    if args.stall_every:
        config["stall_interval_s"] = args.stall_every

    experiment = Experiment2Scroll(config)
    result = experiment.run()

    if not result.data.empty:
        output_path = "exp2_scroll_intervals.csv"
        result.data.to_csv(output_path, index=False)
        print(f"\n   ✓ Results saved to: {output_path}")

    return result


if __name__ == "__main__":
    main()
