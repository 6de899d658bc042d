"""Elapsed-time measurement and ``1d.02h.03m.04s.`` style rendering."""

from .config import TIMING_CONFIG, TimingConfig
from .elements import TimeElements, split_time_elements
from .formatter import time_elements_to_string, time_to_string
from .models import StopwatchSnapshot, snapshot_dump
from .stopwatch import Stopwatch
from .units import TimeUnit, duration_cast

__all__ = [
    "TIMING_CONFIG",
    "TimingConfig",
    "TimeElements",
    "split_time_elements",
    "time_elements_to_string",
    "time_to_string",
    "StopwatchSnapshot",
    "snapshot_dump",
    "Stopwatch",
    "TimeUnit",
    "duration_cast",
]
