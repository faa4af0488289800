from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Sequence

from roombooker.application.exceptions import DispatchError
from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.user import User

SIGNATURE = "Room Booker"


class ConfirmationKind(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ConfirmationMessage:
    kind: ConfirmationKind
    booking_id: str
    to: str
    subject: str
    body: str


_SUBJECTS = {
    ConfirmationKind.CREATED: "Booking Confirmation",
    ConfirmationKind.UPDATED: "Booking Updated",
    ConfirmationKind.CANCELLED: "Booking Cancelled",
}

_LEADS = {
    ConfirmationKind.CREATED: ("has been confirmed", "Details"),
    ConfirmationKind.UPDATED: ("has been updated", "New Details"),
    ConfirmationKind.CANCELLED: ("has been cancelled", "Details of the cancelled booking"),
}


def format_long_date(value: datetime) -> str:
    """e.g. 'Monday, January 15, 2024'."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_time(value: datetime) -> str:
    return value.strftime("%I:%M %p")


def resolve_parties(booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> tuple[User, Room]:
    user = next((u for u in users if u.id == booking.user_id), None)
    room = next((r for r in rooms if r.id == booking.room_id), None)
    if user is None or room is None:
        raise DispatchError(
            f"User or room not found for booking '{booking.id}' "
            f"(user_id={booking.user_id}, room_id={booking.room_id})"
        )
    return user, room


def compose_confirmation(kind: ConfirmationKind, booking: Booking, user: User, room: Room) -> ConfirmationMessage:
    outcome, details = _LEADS[kind]
    body = "\n".join(
        [
            f"Hello {user.name},",
            "",
            f'Your booking for "{booking.title}" {outcome}.',
            "",
            f"{details}:",
            f"- Room: {room.name}",
            f"- Date: {format_long_date(booking.start_time)}",
            f"- Time: {format_time(booking.start_time)} - {format_time(booking.end_time)}",
            "",
            "Thank you,",
            SIGNATURE,
        ]
    )
    return ConfirmationMessage(
        kind=kind,
        booking_id=booking.id,
        to=user.email,
        subject=f"{_SUBJECTS[kind]}: {booking.title}",
        body=body,
    )
