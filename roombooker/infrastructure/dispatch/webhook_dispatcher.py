from __future__ import annotations

from typing import Sequence

from roombooker.application.ports.confirmation_dispatcher import ConfirmationDispatcherPort
from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.user import User
from roombooker.infrastructure.dispatch.messages import (
    ConfirmationKind,
    compose_confirmation,
    resolve_parties,
)
from roombooker.infrastructure.dispatch.webhook_client import WebhookClient


class WebhookConfirmationDispatcher(ConfirmationDispatcherPort):
    def __init__(self, client: WebhookClient) -> None:
        self._client = client

    def dispatch_created(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        self._send(ConfirmationKind.CREATED, booking, users, rooms)

    def dispatch_updated(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        self._send(ConfirmationKind.UPDATED, booking, users, rooms)

    def dispatch_cancelled(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        self._send(ConfirmationKind.CANCELLED, booking, users, rooms)

    def _send(self, kind: ConfirmationKind, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        user, room = resolve_parties(booking, users, rooms)
        self._client.post_message(compose_confirmation(kind, booking, user, room))
