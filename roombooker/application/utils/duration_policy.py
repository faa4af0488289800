from __future__ import annotations

from datetime import date, datetime, time, timedelta

from roombooker.application.exceptions import InvalidDuration
from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.interval import TimeInterval

MAX_BOOKING_DURATION_MINUTES = 4 * 60
DEFAULT_START = time(9, 0)
DEFAULT_LENGTH = timedelta(hours=1)


def validate_duration(
    start: datetime,
    end: datetime,
    max_minutes: int = MAX_BOOKING_DURATION_MINUTES,
) -> None:
    """Raise InvalidDuration unless 0 < end - start <= max_minutes."""
    if end <= start:
        raise InvalidDuration("End time must be after start time.")
    if end - start > timedelta(minutes=max_minutes):
        hours = max_minutes / 60
        label = f"{hours:g} hours" if hours != 1 else "1 hour"
        raise InvalidDuration(f"Booking cannot exceed {label}.")


def default_interval(
    now: datetime,
    initial_day: date | None = None,
    booking: Booking | None = None,
) -> TimeInterval:
    """Initial interval proposed by the booking form.

    Editing keeps the booking's own interval. Picking a calendar day starts
    at 09:00. Otherwise the start rounds forward from `now`: minutes 1-29 go
    to :30, anything else goes to the next whole hour.
    """
    if booking is not None:
        return TimeInterval(booking.start_time, booking.end_time)

    if initial_day is not None:
        if isinstance(initial_day, datetime):
            initial_day = initial_day.date()
        start = datetime.combine(initial_day, DEFAULT_START)
        return TimeInterval(start, start + DEFAULT_LENGTH)

    base = now.replace(second=0, microsecond=0)
    if 0 < base.minute < 30:
        start = base.replace(minute=30)
    else:
        start = base.replace(minute=0) + timedelta(hours=1)
    return TimeInterval(start, start + DEFAULT_LENGTH)
