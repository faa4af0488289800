from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Callable

from roombooker.application.exceptions import NotFound, SchedulingConflict
from roombooker.application.ports.confirmation_dispatcher import ConfirmationDispatcherPort
from roombooker.application.ports.notification_sink import NotificationSinkPort
from roombooker.application.ports.store import StorePort
from roombooker.application.translations import MessageKey
from roombooker.application.use_cases.session import SessionUseCase
from roombooker.application.utils.conflicts import find_conflict
from roombooker.application.utils.duration_policy import (
    MAX_BOOKING_DURATION_MINUTES,
    validate_duration,
)
from roombooker.domain.entities.booking import Booking, BookingDraft
from roombooker.domain.entities.notification import Severity
from roombooker.domain.entities.role import Permission


def _new_booking_id() -> str:
    return uuid.uuid4().hex


class BookingLifecycleUseCase:
    """Create, update and delete bookings against the room overlap rule.

    Mutations are coroutines so callers can treat them like a remote backend,
    but each one runs its conflict check and its write without yielding in
    between; two mutations never interleave.
    """

    def __init__(
        self,
        store: StorePort,
        session: SessionUseCase,
        notifications: NotificationSinkPort,
        dispatcher: ConfirmationDispatcherPort,
        max_duration_minutes: int = MAX_BOOKING_DURATION_MINUTES,
        id_factory: Callable[[], str] = _new_booking_id,
    ) -> None:
        self._store = store
        self._session = session
        self._notifications = notifications
        self._dispatcher = dispatcher
        self._max_duration_minutes = max_duration_minutes
        self._id_factory = id_factory
        self._logger = logging.getLogger(__name__)

    async def create(self, draft: BookingDraft) -> Booking:
        actor = self._session.require_user()
        self._require_room(draft.room_id)
        validate_duration(draft.start_time, draft.end_time, self._max_duration_minutes)

        conflict = find_conflict(draft, self._store.list_bookings())
        if conflict is not None:
            self._reject(draft, conflict)

        booking = Booking(
            id=self._id_factory(),
            user_id=actor.id,
            room_id=draft.room_id,
            title=draft.title,
            start_time=draft.start_time,
            end_time=draft.end_time,
        )
        self._store.put_booking(booking)
        self._logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "room_id": booking.room_id, "user_id": actor.id},
        )
        self._notifications.notify(MessageKey.BOOKING_ADDED, Severity.SUCCESS)
        self._dispatch(self._dispatcher.dispatch_created, booking)
        return booking

    async def update(self, booking_id: str, draft: BookingDraft) -> Booking:
        original = self._store.get_booking(booking_id)
        if original is None:
            raise NotFound("Booking", booking_id)
        self._require_room(draft.room_id)
        validate_duration(draft.start_time, draft.end_time, self._max_duration_minutes)

        conflict = find_conflict(draft, self._store.list_bookings(), exclude_id=booking_id)
        if conflict is not None:
            self._reject(draft, conflict)

        updated = original.with_draft(draft)
        self._store.put_booking(updated)
        self._logger.info(
            "Booking updated",
            extra={"booking_id": updated.id, "room_id": updated.room_id},
        )
        self._notifications.notify(MessageKey.BOOKING_UPDATED, Severity.SUCCESS)
        self._dispatch(self._dispatcher.dispatch_updated, updated)
        return updated

    async def delete(self, booking_id: str) -> Booking | None:
        """Remove a booking. Unknown ids are a silent no-op."""
        snapshot = self._store.remove_booking(booking_id)
        self._notifications.notify(MessageKey.BOOKING_DELETED, Severity.SUCCESS)
        if snapshot is None:
            self._logger.info("Delete of unknown booking ignored", extra={"booking_id": booking_id})
            return None
        self._logger.info("Booking deleted", extra={"booking_id": booking_id, "room_id": snapshot.room_id})
        self._dispatch(self._dispatcher.dispatch_cancelled, snapshot)
        return snapshot

    def find(self, booking_id: str) -> Booking | None:
        return self._store.get_booking(booking_id)

    def get(self, booking_id: str) -> Booking:
        booking = self.find(booking_id)
        if booking is None:
            raise NotFound("Booking", booking_id)
        return booking

    def list_upcoming(self, now: datetime) -> list[Booking]:
        """Bookings starting at or after `now`, limited to the actor's own
        unless their role can view all bookings."""
        upcoming = sorted(
            (b for b in self._store.list_bookings() if b.start_time >= now),
            key=lambda b: (b.start_time, b.id),
        )
        if self._session.has_permission(Permission.VIEW_ALL_BOOKINGS):
            return upcoming
        user = self._session.current_user
        if user is None:
            return []
        return [b for b in upcoming if b.user_id == user.id]

    def list_for_day(self, day: date, room_id: str | None = None) -> list[Booking]:
        return sorted(
            (
                b for b in self._store.list_bookings()
                if b.start_time.date() == day and (room_id is None or b.room_id == room_id)
            ),
            key=lambda b: (b.start_time, b.id),
        )

    def can_modify(self, booking: Booking) -> bool:
        user = self._session.current_user
        if user is None:
            return False
        return booking.user_id == user.id or self._session.has_permission(Permission.MANAGE_ROOMS)

    def _require_room(self, room_id: str) -> None:
        if self._store.get_room(room_id) is None:
            raise NotFound("Room", room_id)

    def _reject(self, draft: BookingDraft, conflict: Booking) -> None:
        self._logger.info(
            "Booking rejected",
            extra={"room_id": draft.room_id, "booking_id": conflict.id, "reason": "conflict"},
        )
        self._notifications.notify(MessageKey.BOOKING_CONFLICT, Severity.ERROR)
        raise SchedulingConflict(conflict)

    def _dispatch(self, send: Callable, booking: Booking) -> None:
        try:
            send(booking, self._store.list_users(), self._store.list_rooms())
        except Exception as e:
            # The mutation is already committed; confirmation is best effort.
            self._logger.exception(
                "Confirmation dispatch failed",
                extra={"booking_id": booking.id, "reason": str(e)},
            )
