#!/usr/bin/env python3
"""
Visualization module for the UI-Thread Responsiveness Benchmark Suite.

Generates plots for all experiments with consistent styling.
Each plot function can be called independently.
"""

import os
from typing import List, Dict, Any, Callable

import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

from ..common import ExperimentResult


def setup_style():
    """Configure matplotlib and seaborn for consistent styling."""
    sns.set_theme(style="whitegrid", palette="deep")
    plt.rcParams['figure.figsize'] = (10, 6)
    plt.rcParams['font.size'] = 11


def plot_exp1_cpu_runs(
    data: pd.DataFrame,
    metadata: Dict[str, Any],
    output_path: str = "exp1_cpu_runs.png",
    dpi: int = 150
) -> str:
    """
    Generate Experiment 1 visualization: sieve execution time per run.

    Args:
        data: DataFrame with Run, Execution Time (ms), Valid
        metadata: Dict with mean_us, std_us, limit
        output_path: Path to save the plot
        dpi: Resolution for saved image

    Returns:
        Path to saved plot file
    """
    setup_style()

    fig, ax = plt.subplots(figsize=(10, 6))

    colors = ["#3498db" if valid else "#e74c3c" for valid in data["Valid"]]
    bars = ax.bar(data["Run"].astype(str), data["Execution Time (ms)"], color=colors, edgecolor='black')

    for bar, val in zip(bars, data["Execution Time (ms)"]):
        ax.text(bar.get_x() + bar.get_width()/2, bar.get_height(),
                f'{val:.1f}', ha='center', va='bottom', fontweight='bold')

    mean_ms = metadata.get("mean_us", 0) / 1000
    std_ms = metadata.get("std_us", 0) / 1000
    ax.axhline(mean_ms, color="#2c3e50", linestyle='--', linewidth=2,
               label=f"Mean {mean_ms:.2f} ms (σ {std_ms:.2f})")

    ax.set_xlabel("Run", fontsize=12)
    ax.set_ylabel("Execution Time (ms)", fontsize=12)
    ax.set_title(f"Experiment 1: Sieve of Eratosthenes (limit {metadata.get('limit', 0):,})",
                 fontsize=14, fontweight='bold')
    ax.legend()

    plt.tight_layout()
    plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close()

    return output_path


def plot_exp2_frame_histogram(
    data: pd.DataFrame,
    metadata: Dict[str, Any],
    output_path: str = "exp2_frame_histogram.png",
    dpi: int = 150
) -> str:
    """
    Generate Experiment 2 visualization: frame interval distribution.

    Marks the nominal frame budget and the jank threshold.
    """
    setup_style()

    fig, ax = plt.subplots(figsize=(10, 6))

    sns.histplot(data["Interval (ms)"], bins=50, color="#3498db", ax=ax)

    budget_ms = metadata.get("frame_budget_us", 16667) / 1000
    threshold_ms = metadata.get("jank_threshold_us", 25000) / 1000
    ax.axvline(budget_ms, color="#2ecc71", linestyle='--', linewidth=2,
               label=f"Frame budget ({budget_ms:.2f} ms)")
    ax.axvline(threshold_ms, color="#e74c3c", linestyle='--', linewidth=2,
               label=f"Jank threshold ({threshold_ms:.2f} ms)")

    ax.set_xlabel("Frame Interval (ms)", fontsize=12)
    ax.set_ylabel("Frames", fontsize=12)
    ax.set_title(f"Experiment 2: Frame Intervals "
                 f"({metadata.get('actual_fps', 0):.1f} FPS, "
                 f"{metadata.get('jank_percentage', 0):.1f}% jank)",
                 fontsize=14, fontweight='bold')
    ax.legend()

    plt.tight_layout()
    plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close()

    return output_path


def plot_exp2_frame_timeline(
    data: pd.DataFrame,
    metadata: Dict[str, Any],
    output_path: str = "exp2_frame_timeline.png",
    dpi: int = 150
) -> str:
    """
    Generate Experiment 2 visualization: frame interval over the window.

    Dropped frames are highlighted.
    """
    setup_style()

    fig, ax = plt.subplots(figsize=(14, 5))

    ax.plot(data["Frame"], data["Interval (ms)"], color="#3498db", linewidth=1)
    dropped = data[data["Dropped"]]
    ax.scatter(dropped["Frame"], dropped["Interval (ms)"], color="#e74c3c",
               zorder=3, s=20, label=f"Dropped ({len(dropped)})")

    threshold_ms = metadata.get("jank_threshold_us", 25000) / 1000
    ax.axhline(threshold_ms, color="#e74c3c", linestyle='--', alpha=0.6)

    ax.set_xlabel("Frame", fontsize=12)
    ax.set_ylabel("Interval (ms)", fontsize=12)
    ax.set_title("Experiment 2: Frame Interval Timeline", fontsize=14, fontweight='bold')
    ax.legend()

    plt.tight_layout()
    plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close()

    return output_path


def plot_exp3_memory_timeline(
    data: pd.DataFrame,
    metadata: Dict[str, Any],
    output_path: str = "exp3_memory_timeline.png",
    dpi: int = 150
) -> str:
    """
    Generate Experiment 3 visualization: RSS over time with the baseline.
    """
    setup_style()

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.plot(data["Elapsed (s)"], data["RSS (MB)"], 'o-', color="#9b59b6",
            linewidth=2, markersize=5, label="RSS")
    baseline = metadata.get("baseline_rss_mb", 0)
    ax.axhline(baseline, color="#7f8c8d", linestyle='--', label=f"Baseline ({baseline:.1f} MB)")

    ax.set_xlabel("Elapsed (s)", fontsize=12)
    ax.set_ylabel("RSS (MB)", fontsize=12)
    ax.set_title(f"Experiment 3: Memory Footprint ({metadata.get('item_count', 0):,} items, "
                 f"+{metadata.get('growth_mb', 0):.2f} MB)",
                 fontsize=14, fontweight='bold')
    ax.legend()

    plt.tight_layout()
    plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close()

    return output_path


def generate_all_plots(
    results: List[ExperimentResult],
    output_dir: str = ".",
    dpi: int = 150,
    sink: Callable[[str], None] = print
) -> List[str]:
    """
    Generate all plots from experiment results.

    Experiment 4 (startup) is a single number and has no plot.

    Args:
        results: List of ExperimentResult objects
        output_dir: Directory to save plots
        dpi: Resolution for saved images

    Returns:
        List of paths to generated plot files
    """
    sink("\n" + "="*70)
    sink("GENERATING VISUALIZATIONS")
    sink("="*70)

    plot_files = []

    exp1 = next((r for r in results if r.experiment_id == 1), None)
    exp2 = next((r for r in results if r.experiment_id == 2), None)
    exp3 = next((r for r in results if r.experiment_id == 3), None)

    plan = []
    if exp1 is not None and not exp1.data.empty:
        plan.append((plot_exp1_cpu_runs, exp1, "exp1_cpu_runs.png"))
    if exp2 is not None and not exp2.data.empty:
        plan.append((plot_exp2_frame_histogram, exp2, "exp2_frame_histogram.png"))
        plan.append((plot_exp2_frame_timeline, exp2, "exp2_frame_timeline.png"))
    if exp3 is not None and not exp3.data.empty:
        plan.append((plot_exp3_memory_timeline, exp3, "exp3_memory_timeline.png"))

    for plot_fn, result, filename in plan:
        filepath = os.path.join(output_dir, filename)
        plot_fn(result.data, result.metadata, filepath, dpi)
        plot_files.append(filepath)
        sink(f"   ✓ Saved: {filepath}")

    return plot_files
