from __future__ import annotations
import time
from typing import Callable
# zero-argument callable returning integer nanoseconds
Clock = Callable[[], int]
def now_monotonic_ns() -> int: return time.monotonic_ns()
