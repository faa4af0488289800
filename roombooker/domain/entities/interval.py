from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol


class HasInterval(Protocol):
    start_time: datetime
    end_time: datetime


@dataclass(frozen=True)
class TimeInterval:
    """Half-open wall-clock interval: includes `start`, excludes `end`."""

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end

    def overlaps(self, other: TimeInterval) -> bool:
        return overlaps(self, other)

    @classmethod
    def for_booking(cls, booking: HasInterval) -> TimeInterval:
        return cls(start=booking.start_time, end=booking.end_time)


def overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    # Touching edges (a.end == b.start) do not count.
    return a.start < b.end and b.start < a.end
