from __future__ import annotations

from roombooker.application.ports.store import StorePort
from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.role import Role
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.user import User


class MemoryStore(StorePort):
    def __init__(
        self,
        rooms: list[Room] | None = None,
        users: list[User] | None = None,
        roles: list[Role] | None = None,
        bookings: list[Booking] | None = None,
    ) -> None:
        self._rooms: dict[str, Room] = {r.id: r for r in rooms or []}
        self._users: dict[str, User] = {u.id: u for u in users or []}
        self._roles: dict[str, Role] = {r.id: r for r in roles or []}
        self._bookings: dict[str, Booking] = {b.id: b for b in bookings or []}

    def list_bookings(self) -> list[Booking]:
        return list(self._bookings.values())

    def get_booking(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def put_booking(self, booking: Booking) -> None:
        self._bookings[booking.id] = booking

    def remove_booking(self, booking_id: str) -> Booking | None:
        return self._bookings.pop(booking_id, None)

    def remove_bookings_for_room(self, room_id: str) -> list[Booking]:
        return self._remove_bookings_where(lambda b: b.room_id == room_id)

    def remove_bookings_for_user(self, user_id: str) -> list[Booking]:
        return self._remove_bookings_where(lambda b: b.user_id == user_id)

    def list_rooms(self) -> list[Room]:
        return list(self._rooms.values())

    def get_room(self, room_id: str) -> Room | None:
        return self._rooms.get(room_id)

    def put_room(self, room: Room) -> None:
        self._rooms[room.id] = room

    def remove_room(self, room_id: str) -> Room | None:
        return self._rooms.pop(room_id, None)

    def list_users(self) -> list[User]:
        return list(self._users.values())

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def put_user(self, user: User) -> None:
        self._users[user.id] = user

    def remove_user(self, user_id: str) -> User | None:
        return self._users.pop(user_id, None)

    def list_roles(self) -> list[Role]:
        return list(self._roles.values())

    def get_role(self, role_id: str) -> Role | None:
        return self._roles.get(role_id)

    def put_role(self, role: Role) -> None:
        self._roles[role.id] = role

    def _remove_bookings_where(self, predicate) -> list[Booking]:
        doomed = [b for b in self._bookings.values() if predicate(b)]
        for booking in doomed:
            del self._bookings[booking.id]
        return doomed
