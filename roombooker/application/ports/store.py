from __future__ import annotations

from abc import ABC, abstractmethod

from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.role import Role
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.user import User


class StorePort(ABC):
    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def put_booking(self, booking: Booking) -> None:
        """Insert or replace a booking keyed by its id."""
        raise NotImplementedError

    @abstractmethod
    def remove_booking(self, booking_id: str) -> Booking | None:
        """Remove a booking, returning the removed value (or None if absent)."""
        raise NotImplementedError

    @abstractmethod
    def remove_bookings_for_room(self, room_id: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def remove_bookings_for_user(self, user_id: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_rooms(self) -> list[Room]:
        raise NotImplementedError

    @abstractmethod
    def get_room(self, room_id: str) -> Room | None:
        raise NotImplementedError

    @abstractmethod
    def put_room(self, room: Room) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_room(self, room_id: str) -> Room | None:
        raise NotImplementedError

    @abstractmethod
    def list_users(self) -> list[User]:
        raise NotImplementedError

    @abstractmethod
    def get_user(self, user_id: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def put_user(self, user: User) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_user(self, user_id: str) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def list_roles(self) -> list[Role]:
        raise NotImplementedError

    @abstractmethod
    def get_role(self, role_id: str) -> Role | None:
        raise NotImplementedError

    @abstractmethod
    def put_role(self, role: Role) -> None:
        raise NotImplementedError
