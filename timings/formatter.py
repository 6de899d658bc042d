"""Rendering of durations as ``1d.02h.03m.04s.000ms.000us.000ns.``."""

from __future__ import annotations

from .elements import TimeElements, split_time_elements
from .units import TimeUnit, UnitLike


def time_elements_to_string(
    elements: TimeElements, minimum_unit: UnitLike = TimeUnit.NANOSECONDS
) -> str:
    """Render ``elements`` down to ``minimum_unit``.

    Leading zero fields are skipped. Once a field is positive, every finer
    field is printed as well, zeros included, until ``minimum_unit`` is
    reached. An all-zero duration renders as ``""``.
    """

    minimum = TimeUnit.parse(minimum_unit)
    parts = []
    active = False
    for unit, value in elements.fields():
        if value > 0:
            active = True
        if active and unit.is_coarser_or_equal(minimum):
            digits = f"{value:0{unit.width}d}" if unit.width else str(value)
            parts.append(f"{digits}{unit.suffix}.")
    return "".join(parts)


def time_to_string(duration: int, unit: UnitLike = TimeUnit.NANOSECONDS) -> str:
    """Split ``duration`` (a count of ``unit``) and render it down to ``unit``."""

    unit = TimeUnit.parse(unit)
    return time_elements_to_string(split_time_elements(duration, unit), unit)


__all__ = ["time_elements_to_string", "time_to_string"]
