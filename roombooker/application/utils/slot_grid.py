from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable

from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.interval import TimeInterval, overlaps
from roombooker.domain.entities.slot import Segment, Slot, TimelineBlock

WORK_DAY_START_HOUR = 8
WORK_DAY_END_HOUR = 18
SLOT_MINUTES = 30


def _midnight(day: date | datetime) -> datetime:
    if isinstance(day, datetime):
        day = day.date()
    return datetime.combine(day, time.min)


def _validate_window(start_hour: int, end_hour: int, step_minutes: int | None = None) -> None:
    if not (0 <= start_hour < end_hour <= 24):
        raise ValueError(f"Invalid work-day window {start_hour}:00-{end_hour}:00")
    if step_minutes is None:
        return
    if step_minutes <= 0 or ((end_hour - start_hour) * 60) % step_minutes:
        raise ValueError(
            f"Slot step of {step_minutes} minutes does not divide the "
            f"{start_hour}:00-{end_hour}:00 window"
        )


def generate_slots(
    room_id: str,
    day: date | datetime,
    existing: Iterable[Booking],
    window_start_hour: int = WORK_DAY_START_HOUR,
    window_end_hour: int = WORK_DAY_END_HOUR,
    step_minutes: int = SLOT_MINUTES,
    exclude_id: str | None = None,
) -> list[Slot]:
    """Quantize a room's day into fixed-width slots and mark the occupied ones.

    A slot is occupied when it overlaps any booking of the room, so a booking
    that does not line up with slot boundaries still blocks every slot it
    touches. Bookings that fall entirely outside the window do not appear.
    This is a display aid; commit-time validation goes through
    `find_conflict`.
    """
    _validate_window(window_start_hour, window_end_hour, step_minutes)
    # Not filtered by start date: an overnight booking from the previous day
    # still occupies the morning slots it runs into.
    bookings = sorted(
        (b for b in existing if b.room_id == room_id and b.id != exclude_id),
        key=lambda b: (b.start_time, b.id),
    )

    step = timedelta(minutes=step_minutes)
    current = _midnight(day) + timedelta(hours=window_start_hour)
    count = (window_end_hour - window_start_hour) * 60 // step_minutes

    slots: list[Slot] = []
    for _ in range(count):
        interval = TimeInterval(current, current + step)
        occupant = next((b for b in bookings if overlaps(interval, b.interval)), None)
        slots.append(Slot(start=interval.start, end=interval.end, booking=occupant))
        current = interval.end
    return slots


def segments(slots: Iterable[Slot]) -> list[Segment]:
    """Collapse contiguous slots with the same occupant into bookable/occupied runs."""
    runs: list[Segment] = []
    for slot in slots:
        if runs and runs[-1].end == slot.start and runs[-1].booking == slot.booking:
            last = runs[-1]
            runs[-1] = Segment(start=last.start, end=slot.end, booking=last.booking)
        else:
            runs.append(Segment(start=slot.start, end=slot.end, booking=slot.booking))
    return runs


def build_timeline(
    room_id: str,
    day: date | datetime,
    existing: Iterable[Booking],
    window_start_hour: int = WORK_DAY_START_HOUR,
    window_end_hour: int = WORK_DAY_END_HOUR,
) -> list[TimelineBlock]:
    """Position each of the room's bookings that start on `day` along the work-day window.

    Offsets are percentages of the window length. A booking starting before
    the window is pinned to the left edge; blocks that would render with no
    width or start past the right edge are dropped.
    """
    _validate_window(window_start_hour, window_end_hour)
    midnight = _midnight(day)
    window_start = midnight + timedelta(hours=window_start_hour)
    total_minutes = (window_end_hour - window_start_hour) * 60

    blocks: list[TimelineBlock] = []
    for booking in sorted(existing, key=lambda b: (b.start_time, b.id)):
        if booking.room_id != room_id or booking.start_time.date() != midnight.date():
            continue
        offset = max(0.0, (booking.start_time - window_start).total_seconds() / 60)
        duration = (booking.end_time - booking.start_time).total_seconds() / 60
        left = offset / total_minutes * 100
        width = duration / total_minutes * 100
        if width <= 0 or left > 100:
            continue
        blocks.append(TimelineBlock(booking=booking, left_pct=left, width_pct=width))
    return blocks
