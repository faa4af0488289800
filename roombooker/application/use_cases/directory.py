from __future__ import annotations

import logging
import uuid
from typing import Iterable

from roombooker.application.exceptions import NotFound
from roombooker.application.ports.notification_sink import NotificationSinkPort
from roombooker.application.ports.store import StorePort
from roombooker.application.translations import MessageKey
from roombooker.domain.entities.notification import Severity
from roombooker.domain.entities.role import Permission, Role
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.user import User


class DirectoryUseCase:
    """Rooms, users and roles administration, including booking cascades."""

    def __init__(self, store: StorePort, notifications: NotificationSinkPort) -> None:
        self._store = store
        self._notifications = notifications
        self._logger = logging.getLogger(__name__)

    async def add_room(
        self,
        name: str,
        capacity: int,
        amenities: Iterable[str] = (),
        photo_url: str = "",
    ) -> Room:
        room = Room(
            id=uuid.uuid4().hex,
            name=name,
            capacity=capacity,
            amenities=frozenset(amenities),
            photo_url=photo_url,
        )
        self._store.put_room(room)
        self._logger.info("Room added", extra={"room_id": room.id})
        self._notifications.notify(MessageKey.ROOM_ADDED, Severity.SUCCESS)
        return room

    async def update_room(self, room: Room) -> Room:
        if self._store.get_room(room.id) is None:
            raise NotFound("Room", room.id)
        self._store.put_room(room)
        self._notifications.notify(MessageKey.ROOM_UPDATED, Severity.SUCCESS)
        return room

    async def delete_room(self, room_id: str) -> None:
        removed = self._store.remove_room(room_id)
        cascaded = self._store.remove_bookings_for_room(room_id)
        if removed is not None:
            self._logger.info(
                "Room deleted",
                extra={"room_id": room_id, "reason": f"{len(cascaded)} bookings cascaded"},
            )
        self._notifications.notify(MessageKey.ROOM_DELETED, Severity.SUCCESS)

    async def add_user(self, name: str, email: str, role_id: str) -> User:
        if self._store.get_role(role_id) is None:
            raise NotFound("Role", role_id)
        user = User(id=uuid.uuid4().hex, name=name, email=email, role_id=role_id)
        self._store.put_user(user)
        self._logger.info("User added", extra={"user_id": user.id})
        self._notifications.notify(MessageKey.USER_ADDED, Severity.SUCCESS)
        return user

    async def delete_user(self, user_id: str) -> None:
        removed = self._store.remove_user(user_id)
        cascaded = self._store.remove_bookings_for_user(user_id)
        if removed is not None:
            self._logger.info(
                "User deleted",
                extra={"user_id": user_id, "reason": f"{len(cascaded)} bookings cascaded"},
            )
        self._notifications.notify(MessageKey.USER_DELETED, Severity.SUCCESS)

    async def update_user_role(self, user_id: str, role_id: str) -> User:
        user = self._store.get_user(user_id)
        if user is None:
            raise NotFound("User", user_id)
        if self._store.get_role(role_id) is None:
            raise NotFound("Role", role_id)
        updated = User(id=user.id, name=user.name, email=user.email, role_id=role_id)
        self._store.put_user(updated)
        self._notifications.notify(MessageKey.ROLE_UPDATED, Severity.SUCCESS)
        return updated

    async def update_role_permissions(self, role_id: str, permissions: Iterable[Permission]) -> Role:
        role = self._store.get_role(role_id)
        if role is None:
            raise NotFound("Role", role_id)
        updated = Role(id=role.id, name=role.name, permissions=frozenset(permissions))
        self._store.put_role(updated)
        self._notifications.notify(MessageKey.PERMISSIONS_UPDATED, Severity.SUCCESS)
        return updated
