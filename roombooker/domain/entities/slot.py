from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from roombooker.domain.entities.booking import Booking


@dataclass(frozen=True)
class Slot:
    start: datetime
    end: datetime
    booking: Booking | None = None  # occupying booking, if any

    @property
    def is_free(self) -> bool:
        return self.booking is None


@dataclass(frozen=True)
class Segment:
    """A run of adjacent slots sharing the same occupant (or all free)."""

    start: datetime
    end: datetime
    booking: Booking | None = None

    @property
    def is_free(self) -> bool:
        return self.booking is None


@dataclass(frozen=True)
class TimelineBlock:
    booking: Booking
    left_pct: float
    width_pct: float
