from __future__ import annotations

from datetime import date, datetime, time

from roombooker.domain.entities.booking import Booking, BookingDraft

DAY = date(2024, 1, 15)  # a Monday


def at(hour: int, minute: int = 0, day: date = DAY) -> datetime:
    return datetime.combine(day, time(hour, minute))


def booking(booking_id: str, room_id: str, start: datetime, end: datetime, user_id: str = "user-1") -> Booking:
    return Booking(
        id=booking_id,
        user_id=user_id,
        room_id=room_id,
        title=f"Meeting {booking_id}",
        start_time=start,
        end_time=end,
    )


def draft(room_id: str, start: datetime, end: datetime, title: str = "Sync") -> BookingDraft:
    return BookingDraft(room_id=room_id, title=title, start_time=start, end_time=end)


class FakeClock:
    def __init__(self, now_ts: float = 1_000.0) -> None:
        self.now_ts = now_ts

    def __call__(self) -> float:
        return self.now_ts
