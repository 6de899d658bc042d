"""Thread-safe stopwatch over a monotonic clock."""

from __future__ import annotations

from threading import RLock
from typing import Optional

from .clock import Clock, now_monotonic_ns
from .config import TIMING_CONFIG, TimingConfig
from .formatter import time_to_string
from .models import StopwatchSnapshot
from .units import TimeUnit, UnitLike, duration_cast


class Stopwatch:
    """Measures the time between :meth:`start` and :meth:`stop`.

    A new stopwatch is already running. While running, the end instant is the
    current clock reading; after :meth:`stop` it is frozen. Every public method
    holds the same re-entrant lock, so one instance can be shared by threads.
    """

    def __init__(self, clock: Optional[Clock] = None, config: Optional[TimingConfig] = None):
        self._clock: Clock = clock or now_monotonic_ns
        self._config = config or TIMING_CONFIG
        self._lock = RLock()
        self._start_ns = 0
        self._end_ns = 0
        self._running = False
        self.start()

    def start(self) -> None:
        with self._lock:
            now = self._clock()
            self._start_ns = now
            self._end_ns = now
            self._running = True

    def stop(self) -> None:
        with self._lock:
            self._end_ns = self._clock()
            self._running = False

    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def get_start_instant(self) -> int:
        with self._lock:
            return self._start_ns

    def get_end_instant(self) -> int:
        """Frozen end instant, or the current clock reading while running."""
        with self._lock:
            return self._clock() if self._running else self._end_ns

    running = property(is_running)
    start_instant = property(get_start_instant)
    end_instant = property(get_end_instant)

    def _unit(self, unit: Optional[UnitLike]) -> TimeUnit:
        return self._config.default_unit if unit is None else TimeUnit.parse(unit)

    def elapsed(self, unit: Optional[UnitLike] = None) -> int:
        """Elapsed time as a whole count of ``unit``, truncated toward zero."""
        unit = self._unit(unit)
        with self._lock:
            return duration_cast(self.get_end_instant() - self._start_ns, TimeUnit.NANOSECONDS, unit)

    def to_string(self, unit: Optional[UnitLike] = None) -> str:
        unit = self._unit(unit)
        with self._lock:
            return time_to_string(self.elapsed(unit), unit)

    def snapshot(self, unit: Optional[UnitLike] = None) -> StopwatchSnapshot:
        unit = self._unit(unit)
        with self._lock:
            end_ns = self.get_end_instant()
            elapsed = duration_cast(end_ns - self._start_ns, TimeUnit.NANOSECONDS, unit)
            return StopwatchSnapshot(
                start_ns=self._start_ns,
                end_ns=end_ns,
                running=self._running,
                unit=unit,
                elapsed=elapsed,
                text=time_to_string(elapsed, unit),
            )

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        with self._lock:
            state = "running" if self._running else "stopped"
            return f"<Stopwatch {state} elapsed={self.elapsed(TimeUnit.NANOSECONDS)}ns>"


__all__ = ["Stopwatch"]
