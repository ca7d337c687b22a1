"""
UI-Thread Responsiveness Benchmark Experiments.

Each experiment can be run independently or as part of the full suite.
"""

from .exp1_cpu import Experiment1CPU
from .exp2_scroll import Experiment2Scroll
from .exp3_memory import Experiment3Memory
from .exp4_startup import Experiment4Startup

__all__ = [
    "Experiment1CPU",
    "Experiment2Scroll",
    "Experiment3Memory",
    "Experiment4Startup",
]
