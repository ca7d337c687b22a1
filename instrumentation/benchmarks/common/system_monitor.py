"""
Process Memory Monitor for benchmarking.

Provides non-blocking monitoring of the benchmark process's resident set
size (RSS) and CPU utilization while a workload runs. Sampling happens on
a daemon thread so the measured thread is never interrupted by it.
"""

import threading
import time
from typing import Optional, List, Dict

import numpy as np
import psutil

from .data_classes import MemoryMetrics

BYTES_PER_MB = 1024 * 1024


class SystemMonitor:
    """
    Non-blocking memory footprint monitor that runs in a separate thread.

    Captures a baseline RSS when started, then RSS and process CPU %
    at a fixed interval until stopped.

    Usage:
        with SystemMonitor(interval=0.05) as monitor:
            # ... run workload ...
        stats = monitor.get_stats()
    """

    def __init__(self, interval: float = 0.1, process: Optional[psutil.Process] = None):
        """
        Initialize the system monitor.

        Args:
            interval: Sampling interval in seconds (default 0.1s)
            process: Process to observe (default: the current process)
        """
        if interval <= 0:
            raise ValueError(f"Sampling interval must be positive, got {interval}")

        self.interval = interval

        self._active = False
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._stop_event = threading.Event()

        # Collected samples
        self._baseline_rss = 0
        self._cpu_samples: List[float] = []
        self._memory_samples: List[int] = []  # RSS in bytes
        self._elapsed_samples: List[float] = []  # Seconds since start
        self._start_time = 0.0

        self._process = process or psutil.Process()

    def __enter__(self) -> 'SystemMonitor':
        """Start monitoring when entering context."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Stop monitoring when exiting context."""
        self.stop()

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        """Start the monitoring thread."""
        if self._active:
            return

        self._cpu_samples = []
        self._memory_samples = []
        self._elapsed_samples = []
        self._start_time = time.perf_counter()
        self._baseline_rss = self._process.memory_info().rss

        # Prime psutil's CPU measurement (first call returns 0)
        self._process.cpu_percent()

        self._active = True
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._monitor_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the monitoring thread and take one final sample."""
        if not self._active:
            return

        self._active = False
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=self.interval * 2)
            self._thread = None
        self._sample()

    def _sample(self) -> None:
        try:
            memory = self._process.memory_info().rss
            cpu = self._process.cpu_percent()
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            return

        with self._lock:
            self._memory_samples.append(memory)
            self._cpu_samples.append(cpu)
            self._elapsed_samples.append(time.perf_counter() - self._start_time)

    def _monitor_loop(self) -> None:
        """Main monitoring loop - runs in separate thread."""
        while self._active:
            self._sample()
            self._stop_event.wait(self.interval)

    def get_stats(self) -> MemoryMetrics:
        """
        Get aggregated statistics from collected samples.

        Returns:
            MemoryMetrics with baseline/peak/final RSS and average CPU
        """
        with self._lock:
            baseline_mb = self._baseline_rss / BYTES_PER_MB
            if not self._memory_samples:
                return MemoryMetrics(
                    baseline_rss_mb=baseline_mb,
                    peak_rss_mb=baseline_mb,
                    final_rss_mb=baseline_mb,
                    avg_cpu_percent=0.0,
                    sample_count=0
                )

            return MemoryMetrics(
                baseline_rss_mb=baseline_mb,
                peak_rss_mb=max(self._baseline_rss, max(self._memory_samples)) / BYTES_PER_MB,
                final_rss_mb=self._memory_samples[-1] / BYTES_PER_MB,
                avg_cpu_percent=float(np.mean(self._cpu_samples)),
                sample_count=len(self._memory_samples)
            )

    def get_raw_samples(self) -> Dict[str, List]:
        """Get raw sample data for detailed analysis."""
        with self._lock:
            return {
                "cpu_percent": list(self._cpu_samples),
                "memory_bytes": list(self._memory_samples),
                "elapsed_s": list(self._elapsed_samples)
            }
