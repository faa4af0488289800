from __future__ import annotations

from datetime import datetime
from typing import Iterable

from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.room_status import Available, Busy, RoomStatus, Upcoming


def resolve_status(room_id: str, bookings: Iterable[Booking], now: datetime) -> RoomStatus:
    """Classify a room as Busy, Upcoming or Available at `now`.

    Only bookings that have not ended yet are considered. Recomputed on every
    call; callers should not cache the result across render ticks.
    """
    relevant = sorted(
        (b for b in bookings if b.room_id == room_id and b.end_time > now),
        key=lambda b: (b.start_time, b.id),
    )

    current = next((b for b in relevant if b.start_time <= now < b.end_time), None)
    if current is not None:
        return Busy(booking=current)

    upcoming = next((b for b in relevant if b.start_time > now), None)
    if upcoming is not None:
        return Upcoming(booking=upcoming)

    return Available()


def resolve_all(rooms: Iterable[Room], bookings: Iterable[Booking], now: datetime) -> dict[str, RoomStatus]:
    snapshot = list(bookings)
    return {room.id: resolve_status(room.id, snapshot, now) for room in rooms}
