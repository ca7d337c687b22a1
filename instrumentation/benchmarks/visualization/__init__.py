"""
Visualization module for the UI-Thread Responsiveness Benchmarks.
"""

from .plots import (
    setup_style,
    plot_exp1_cpu_runs,
    plot_exp2_frame_histogram,
    plot_exp2_frame_timeline,
    plot_exp3_memory_timeline,
    generate_all_plots,
)

__all__ = [
    "setup_style",
    "plot_exp1_cpu_runs",
    "plot_exp2_frame_histogram",
    "plot_exp2_frame_timeline",
    "plot_exp3_memory_timeline",
    "generate_all_plots",
]
