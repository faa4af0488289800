"""
Tests for booking length limits and the booking form's default interval.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from roombooker.application.exceptions import InvalidDuration
from roombooker.application.utils.duration_policy import default_interval, validate_duration
from tests.helpers import DAY, at, booking


def test_valid_duration_passes():
    validate_duration(at(9), at(13))


@pytest.mark.parametrize("start,end", [(at(10), at(10)), (at(10), at(9))])
def test_non_positive_duration_is_rejected(start, end):
    with pytest.raises(InvalidDuration, match="after start"):
        validate_duration(start, end)


def test_duration_over_four_hours_is_rejected():
    with pytest.raises(InvalidDuration, match="4 hours"):
        validate_duration(at(9), at(13, 1))


def test_custom_maximum():
    with pytest.raises(InvalidDuration):
        validate_duration(at(9), at(10, 30), max_minutes=60)


@pytest.mark.parametrize(
    "now,expected_start",
    [
        (at(10, 0), at(11, 0)),
        (at(10, 1), at(10, 30)),
        (at(10, 29), at(10, 30)),
        (at(10, 30), at(11, 0)),
        (at(10, 45), at(11, 0)),
    ],
)
def test_default_interval_rounds_forward(now, expected_start):
    interval = default_interval(now)

    assert interval.start == expected_start
    assert interval.end == expected_start.replace(hour=expected_start.hour + 1)


def test_default_interval_for_calendar_day_starts_at_nine():
    interval = default_interval(at(16, 20), initial_day=DAY)

    assert interval.start == datetime(2024, 1, 15, 9, 0)
    assert interval.end == datetime(2024, 1, 15, 10, 0)


def test_default_interval_for_existing_booking_keeps_its_times():
    existing = booking("b1", "room-1", at(14), at(15, 30))

    interval = default_interval(at(8), booking=existing)

    assert (interval.start, interval.end) == (at(14), at(15, 30))
