"""
UI-Thread Responsiveness Instrumentation.

This package contains the measurement core and the benchmark suite that
exercises it.
"""

from . import benchmarks

__all__ = ["benchmarks"]
