"""Time units used for elapsed durations and their rendering."""

from __future__ import annotations

from enum import Enum
from typing import Union


class TimeUnit(Enum):
    """Supported resolutions, coarse to fine.

    Each member's value is its scale in nanoseconds per unit, so comparing two
    units is comparing two integers.
    """

    DAYS = 86_400 * 1_000_000_000
    HOURS = 3_600 * 1_000_000_000
    MINUTES = 60 * 1_000_000_000
    SECONDS = 1_000_000_000
    MILLISECONDS = 1_000_000
    MICROSECONDS = 1_000
    NANOSECONDS = 1

    @property
    def ns(self) -> int:
        return self.value

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]

    @property
    def width(self) -> int:
        """Zero-pad width of the rendered field (0 means no padding)."""
        return _WIDTHS[self]

    def is_coarser_or_equal(self, other: "TimeUnit") -> bool:
        return self.value >= other.value

    @classmethod
    def parse(cls, value: Union["TimeUnit", str]) -> "TimeUnit":
        """Resolve a member, a suffix (``"ms"``) or a name (``"milliseconds"``)."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for unit in cls:
                if key == unit.suffix or key.upper() == unit.name:
                    return unit
        raise ValueError(
            f"unknown time unit {value!r}; expected one of "
            + ", ".join(u.suffix for u in cls)
        )


_SUFFIXES = {
    TimeUnit.DAYS: "d",
    TimeUnit.HOURS: "h",
    TimeUnit.MINUTES: "m",
    TimeUnit.SECONDS: "s",
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.MICROSECONDS: "us",
    TimeUnit.NANOSECONDS: "ns",
}

_WIDTHS = {
    TimeUnit.DAYS: 0,
    TimeUnit.HOURS: 2,
    TimeUnit.MINUTES: 2,
    TimeUnit.SECONDS: 2,
    TimeUnit.MILLISECONDS: 3,
    TimeUnit.MICROSECONDS: 3,
    TimeUnit.NANOSECONDS: 3,
}

UnitLike = Union[TimeUnit, str]


def _trunc_div(num: int, den: int) -> int:
    # floor division rounds toward -inf; durations truncate toward zero
    q = abs(num) // den
    return q if num >= 0 else -q


def duration_cast(count: int, from_unit: UnitLike, to_unit: UnitLike) -> int:
    """Convert ``count`` of ``from_unit`` into whole ``to_unit``, truncating toward zero."""

    src = TimeUnit.parse(from_unit)
    dst = TimeUnit.parse(to_unit)
    return _trunc_div(count * src.ns, dst.ns)


__all__ = ["TimeUnit", "UnitLike", "duration_cast"]
