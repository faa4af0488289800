from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union

from roombooker.domain.entities.booking import Booking


class RoomStatusKind(str, Enum):
    AVAILABLE = "available"
    BUSY = "busy"
    UPCOMING = "upcoming"


@dataclass(frozen=True)
class Available:
    kind: Literal[RoomStatusKind.AVAILABLE] = field(default=RoomStatusKind.AVAILABLE, init=False)


@dataclass(frozen=True)
class Busy:
    booking: Booking
    kind: Literal[RoomStatusKind.BUSY] = field(default=RoomStatusKind.BUSY, init=False)


@dataclass(frozen=True)
class Upcoming:
    booking: Booking
    kind: Literal[RoomStatusKind.UPCOMING] = field(default=RoomStatusKind.UPCOMING, init=False)


RoomStatus = Union[Available, Busy, Upcoming]
