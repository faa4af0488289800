from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from roombooker.domain.entities.interval import TimeInterval


@dataclass(frozen=True)
class BookingDraft:
    """Fields a caller supplies when creating or editing a booking."""

    room_id: str
    title: str
    start_time: datetime
    end_time: datetime

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval(self.start_time, self.end_time)


@dataclass(frozen=True)
class Booking:
    id: str
    user_id: str
    room_id: str
    title: str
    start_time: datetime
    end_time: datetime

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval(self.start_time, self.end_time)

    def with_draft(self, draft: BookingDraft) -> Booking:
        """Full replacement of the mutable fields; id and user_id are kept."""
        return Booking(
            id=self.id,
            user_id=self.user_id,
            room_id=draft.room_id,
            title=draft.title,
            start_time=draft.start_time,
            end_time=draft.end_time,
        )
