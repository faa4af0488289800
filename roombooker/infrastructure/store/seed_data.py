from __future__ import annotations

from datetime import date, datetime, time, timedelta

from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.role import Permission, Role
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.user import User
from roombooker.infrastructure.store.memory_store import MemoryStore

ROLES = [
    Role(
        id="role-admin",
        name="Admin",
        permissions=frozenset(
            {Permission.MANAGE_ROOMS, Permission.MANAGE_SETTINGS, Permission.VIEW_ALL_BOOKINGS}
        ),
    ),
    Role(
        id="role-manager",
        name="Manager",
        permissions=frozenset({Permission.MANAGE_ROOMS, Permission.VIEW_ALL_BOOKINGS}),
    ),
    Role(id="role-employee", name="Employee", permissions=frozenset()),
]

USERS = [
    User(id="user-1", name="Sam Wilson", email="sam.wilson@example.com", role_id="role-admin"),
    User(id="user-2", name="Alex Johnson", email="alex.johnson@example.com", role_id="role-manager"),
    User(id="user-3", name="Maria Garcia", email="maria.garcia@example.com", role_id="role-employee"),
    User(id="user-4", name="Omar Haddad", email="omar.haddad@example.com", role_id="role-employee"),
]

ROOMS = [
    Room(
        id="room-1",
        name="Orion",
        capacity=8,
        amenities=frozenset({"projector", "whiteboard", "video conferencing"}),
        photo_url="https://picsum.photos/seed/orion/800/600",
    ),
    Room(
        id="room-2",
        name="Vega",
        capacity=4,
        amenities=frozenset({"whiteboard"}),
        photo_url="https://picsum.photos/seed/vega/800/600",
    ),
    Room(
        id="room-3",
        name="Andromeda",
        capacity=16,
        amenities=frozenset({"projector", "video conferencing", "speakerphone"}),
        photo_url="https://picsum.photos/seed/andromeda/800/600",
    ),
    Room(
        id="room-4",
        name="Lyra",
        capacity=2,
        amenities=frozenset(),
        photo_url="https://picsum.photos/seed/lyra/800/600",
    ),
]


def _at(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime.combine(day, time(hour, minute))


def seed_bookings(today: date) -> list[Booking]:
    tomorrow = today + timedelta(days=1)
    return [
        Booking("booking-1", "user-1", "room-1", "Quarterly planning", _at(today, 9), _at(today, 10, 30)),
        Booking("booking-2", "user-2", "room-1", "Design review", _at(today, 11), _at(today, 12)),
        Booking("booking-3", "user-3", "room-2", "1:1", _at(today, 14), _at(today, 14, 30)),
        Booking("booking-4", "user-4", "room-3", "All hands", _at(tomorrow, 10), _at(tomorrow, 12)),
        Booking("booking-5", "user-3", "room-1", "Sprint retro", _at(tomorrow, 15), _at(tomorrow, 16)),
    ]


def seed_store(today: date | None = None) -> MemoryStore:
    """Demo data set; bookings are placed relative to `today`."""
    today = today or date.today()
    return MemoryStore(
        rooms=list(ROOMS),
        users=list(USERS),
        roles=list(ROLES),
        bookings=seed_bookings(today),
    )
