from __future__ import annotations

import logging
from typing import Sequence

from roombooker.application.ports.confirmation_dispatcher import ConfirmationDispatcherPort
from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.user import User
from roombooker.infrastructure.dispatch.messages import (
    ConfirmationKind,
    ConfirmationMessage,
    compose_confirmation,
    resolve_parties,
)


class LoggingConfirmationDispatcher(ConfirmationDispatcherPort):
    """Simulated e-mail: writes each confirmation to the log and keeps a copy."""

    def __init__(self) -> None:
        self.sent: list[ConfirmationMessage] = []
        self._logger = logging.getLogger(__name__)

    def dispatch_created(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        self._send(ConfirmationKind.CREATED, booking, users, rooms)

    def dispatch_updated(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        self._send(ConfirmationKind.UPDATED, booking, users, rooms)

    def dispatch_cancelled(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        self._send(ConfirmationKind.CANCELLED, booking, users, rooms)

    def _send(self, kind: ConfirmationKind, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        user, room = resolve_parties(booking, users, rooms)
        message = compose_confirmation(kind, booking, user, room)
        self.sent.append(message)
        self._logger.info(
            "Simulated email to %s: %s\n%s",
            message.to,
            message.subject,
            message.body,
            extra={"booking_id": booking.id, "user_id": user.id},
        )
