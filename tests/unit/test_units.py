# tests/unit/test_units.py
import pytest

from timings import TimeUnit, duration_cast


def test_units_are_ordered_coarse_to_fine():
    units = list(TimeUnit)
    assert units[0] is TimeUnit.DAYS
    assert units[-1] is TimeUnit.NANOSECONDS
    assert [u.ns for u in units] == sorted((u.ns for u in units), reverse=True)


def test_coarser_or_equal():
    assert TimeUnit.SECONDS.is_coarser_or_equal(TimeUnit.MILLISECONDS)
    assert TimeUnit.SECONDS.is_coarser_or_equal(TimeUnit.SECONDS)
    assert not TimeUnit.MICROSECONDS.is_coarser_or_equal(TimeUnit.MILLISECONDS)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ms", TimeUnit.MILLISECONDS),
        ("us", TimeUnit.MICROSECONDS),
        ("d", TimeUnit.DAYS),
        ("seconds", TimeUnit.SECONDS),
        ("HOURS", TimeUnit.HOURS),
        (" ns ", TimeUnit.NANOSECONDS),
        (TimeUnit.MINUTES, TimeUnit.MINUTES),
    ],
)
def test_parse(raw, expected):
    assert TimeUnit.parse(raw) is expected


@pytest.mark.parametrize("raw", ["", "fortnight", "MS", 3])
def test_parse_rejects_unknown(raw):
    with pytest.raises(ValueError):
        TimeUnit.parse(raw)


def test_duration_cast_truncates_toward_zero():
    assert duration_cast(1_999, TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS) == 1
    assert duration_cast(-1_999, TimeUnit.NANOSECONDS, TimeUnit.MICROSECONDS) == -1
    assert duration_cast(3, TimeUnit.DAYS, TimeUnit.HOURS) == 72
    assert duration_cast(59, "m", "h") == 0
