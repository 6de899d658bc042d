"""Decomposition of a duration into calendar-like fields."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator, Tuple

from .units import TimeUnit, UnitLike, duration_cast

# TimeUnit is declared coarse to fine, the same order as the TimeElements fields.
UNITS_COARSE_TO_FINE = tuple(TimeUnit)


@dataclass(frozen=True)
class TimeElements:
    """A duration split into days, hours, ... nanoseconds.

    Every field is a count local to its own unit, so ``h`` is in ``[0, 24)``
    for a non-negative duration.
    """

    d: int = 0
    h: int = 0
    m: int = 0
    s: int = 0
    ms: int = 0
    us: int = 0
    ns: int = 0

    def fields(self) -> Iterator[Tuple[TimeUnit, int]]:
        return zip(UNITS_COARSE_TO_FINE, astuple(self))

    def to_nanoseconds(self) -> int:
        return sum(unit.ns * value for unit, value in self.fields())


def split_time_elements(duration: int, unit: UnitLike = TimeUnit.NANOSECONDS) -> TimeElements:
    """Split ``duration`` (a count of ``unit``) into :class:`TimeElements`.

    Each field is extracted with a truncating cast and subtracted from the
    remainder before moving to the next finer unit.
    """

    remaining = duration_cast(duration, unit, TimeUnit.NANOSECONDS)
    values = []
    for field_unit in UNITS_COARSE_TO_FINE:
        value = duration_cast(remaining, TimeUnit.NANOSECONDS, field_unit)
        remaining -= value * field_unit.ns
        values.append(value)
    return TimeElements(*values)


__all__ = ["TimeElements", "UNITS_COARSE_TO_FINE", "split_time_elements"]
