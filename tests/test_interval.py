"""
Tests for half-open interval overlap.
"""

from __future__ import annotations

from datetime import timedelta

from roombooker.domain.entities.interval import TimeInterval, overlaps
from tests.helpers import at


def test_back_to_back_intervals_do_not_overlap():
    """09:00-10:00 and 10:00-11:00 share only the boundary instant."""
    first = TimeInterval(at(9), at(10))
    second = TimeInterval(at(10), at(11))

    assert overlaps(first, second) is False
    assert overlaps(second, first) is False


def test_partial_overlap():
    assert overlaps(TimeInterval(at(9), at(10)), TimeInterval(at(9, 30), at(10, 30))) is True


def test_containment_counts_as_overlap():
    outer = TimeInterval(at(8), at(12))
    inner = TimeInterval(at(9), at(9, 15))

    assert outer.overlaps(inner)
    assert inner.overlaps(outer)


def test_identical_intervals_overlap():
    interval = TimeInterval(at(14), at(15))
    assert overlaps(interval, interval)


def test_contains_is_half_open():
    interval = TimeInterval(at(9), at(10))

    assert interval.contains(at(9))
    assert interval.contains(at(9, 59))
    assert not interval.contains(at(10))
    assert interval.duration == timedelta(hours=1)
