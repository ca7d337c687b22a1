"""
Configuration for the UI-Thread Responsiveness Benchmark Suite.

This module contains all configurable parameters for the benchmark experiments.
The defaults mirror the mobile reference apps so results stay comparable across
implementations. Modify these values to adjust the benchmark behavior.
"""

import os

# =============================================================================
# GLOBAL CONFIGURATION
# =============================================================================

CONFIG = {
    # Label printed in every framed console block: "<PLATFORM> BENCHMARK - ..."
    "platform_label": os.getenv("BENCHMARK_PLATFORM", "PYTHON"),

    # Experiment 1: CPU Test (Sieve of Eratosthenes on the calling thread)
    "sieve_prime_limit": 1000000,  # 1 million
    "expected_prime_count": 78498,  # Known result for validation
    "max_test_history": 10,  # Most-recent-first history cap per test kind
    "cpu_runs": 5,

    # Experiment 2: Scroll/FPS Test
    "gpu_test_item_count": 1000,  # Synthetic list rows
    "scroll_duration_seconds": 30,
    "target_frame_time_us": 16667,  # 60 FPS = 16.67ms per frame
    "jank_multiplier": 1.5,  # >1.5x budget (25ms) is a dropped frame
    "good_fps_threshold": 55.0,
    "jank_percentage_threshold": 5.0,
    "frame_workload_items": 12,  # Rows "rendered" per frame
    "stall_interval_s": None,  # Inject a sieve stall every N seconds (None = off)
    "stall_prime_limit": 200000,

    # Experiment 3: Memory Footprint
    "memory_item_count": 1000,
    "monitor_interval_s": 0.05,

    # Output Configuration
    "output_csv": "results.csv",
    "plot_dpi": 150,
}


def get_quick_config() -> dict:
    """
    Return a modified config for quick benchmark runs (~10 s).

    Shortens the scroll window and the number of CPU runs while keeping
    the measurement methodology identical.
    """
    quick = CONFIG.copy()
    quick.update({
        "cpu_runs": 3,
        "scroll_duration_seconds": 5,
        "gpu_test_item_count": 200,
        "memory_item_count": 200,
    })
    return quick
