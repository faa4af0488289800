from __future__ import annotations

from typing import Iterable, Protocol

from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.interval import TimeInterval, overlaps


class Candidate(Protocol):
    room_id: str

    @property
    def interval(self) -> TimeInterval: ...


def _scan_order(booking: Booking) -> tuple:
    return (booking.start_time, booking.id)


def find_conflict(
    candidate: Candidate,
    existing: Iterable[Booking],
    exclude_id: str | None = None,
) -> Booking | None:
    """Return the earliest booking in the candidate's room that overlaps it.

    `exclude_id` is the id of the booking being edited so that it does not
    collide with its own previous interval. Returns None when the candidate
    can be committed.
    """
    interval = candidate.interval
    same_room = (
        b for b in existing
        if b.room_id == candidate.room_id and b.id != exclude_id
    )
    for booking in sorted(same_room, key=_scan_order):
        if overlaps(interval, booking.interval):
            return booking
    return None


def has_conflict(
    candidate: Candidate,
    existing: Iterable[Booking],
    exclude_id: str | None = None,
) -> bool:
    return find_conflict(candidate, existing, exclude_id) is not None
