"""Serialisable views of a stopwatch measurement."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel

from .units import TimeUnit


class StopwatchSnapshot(BaseModel):
    """One consistent reading of a :class:`~timings.stopwatch.Stopwatch`.

    ``elapsed`` is a count of ``unit``; ``text`` is the same value rendered by
    :func:`~timings.formatter.time_to_string`.
    """

    start_ns: int
    end_ns: int
    running: bool
    unit: TimeUnit
    elapsed: int
    text: str

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns


def snapshot_dump(snapshot: StopwatchSnapshot) -> Dict[str, Any]:
    """Return a plain ``dict`` for ``snapshot`` with the unit as its suffix."""

    payload = snapshot.model_dump()
    payload["unit"] = snapshot.unit.suffix
    return payload


__all__ = ["StopwatchSnapshot", "snapshot_dump"]
