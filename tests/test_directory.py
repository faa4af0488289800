"""
Tests for rooms, users and roles administration.
"""

from __future__ import annotations

import asyncio

import pytest

from roombooker.application.exceptions import NotFound
from roombooker.domain.entities.role import Permission
from roombooker.domain.entities.room import Room
from tests.helpers import at, booking


def test_delete_room_cascades_its_bookings(directory, store, notifications):
    store.put_booking(booking("b1", "room-1", at(9), at(10)))
    store.put_booking(booking("b2", "room-1", at(11), at(12)))
    store.put_booking(booking("b3", "room-2", at(9), at(10)))

    asyncio.run(directory.delete_room("room-1"))

    assert store.get_room("room-1") is None
    assert [b.id for b in store.list_bookings()] == ["b3"]
    assert notifications.current().key == "roomDeleted"


def test_delete_user_cascades_their_bookings(directory, store):
    store.put_booking(booking("b1", "room-1", at(9), at(10), user_id="user-3"))
    store.put_booking(booking("b2", "room-2", at(9), at(10), user_id="user-4"))

    asyncio.run(directory.delete_user("user-3"))

    assert store.get_user("user-3") is None
    assert [b.id for b in store.list_bookings()] == ["b2"]


def test_delete_unknown_room_is_a_no_op(directory, store):
    rooms_before = store.list_rooms()

    asyncio.run(directory.delete_room("missing"))

    assert store.list_rooms() == rooms_before


def test_add_and_update_room(directory, store):
    room = asyncio.run(directory.add_room("Nova", 6, ["tv", "whiteboard"]))

    assert store.get_room(room.id).amenities == frozenset({"tv", "whiteboard"})

    renamed = Room(id=room.id, name="Supernova", capacity=10)
    asyncio.run(directory.update_room(renamed))
    assert store.get_room(room.id).name == "Supernova"


def test_update_unknown_room_raises(directory):
    with pytest.raises(NotFound):
        asyncio.run(directory.update_room(Room(id="ghost", name="Ghost", capacity=1)))


def test_add_user_requires_existing_role(directory, store):
    user = asyncio.run(directory.add_user("Lee Park", "lee@example.com", "role-employee"))
    assert store.get_user(user.id).name == "Lee Park"

    with pytest.raises(NotFound):
        asyncio.run(directory.add_user("Nope", "nope@example.com", "role-missing"))


def test_update_user_role(directory, store, notifications):
    updated = asyncio.run(directory.update_user_role("user-3", "role-manager"))

    assert updated.role_id == "role-manager"
    assert store.get_user("user-3").role_id == "role-manager"
    assert notifications.current().key == "roleUpdated"

    with pytest.raises(NotFound):
        asyncio.run(directory.update_user_role("user-3", "role-missing"))
    with pytest.raises(NotFound):
        asyncio.run(directory.update_user_role("missing", "role-manager"))


def test_update_role_permissions(directory, store, session):
    asyncio.run(directory.update_role_permissions("role-employee", [Permission.VIEW_ALL_BOOKINGS]))

    session.login("Maria Garcia", "password")
    assert session.has_permission(Permission.VIEW_ALL_BOOKINGS)
    assert not session.has_permission(Permission.MANAGE_ROOMS)

    with pytest.raises(NotFound):
        asyncio.run(directory.update_role_permissions("role-missing", []))
