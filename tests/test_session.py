"""
Tests for sign-in and role permissions.
"""

from __future__ import annotations

import pytest

from roombooker.application.exceptions import PermissionDenied, Unauthenticated
from roombooker.domain.entities.role import Permission
from roombooker.domain.entities.user import User


def test_login_is_case_insensitive_and_trims(session):
    assert session.login("  SAM wilson ", "password") is True
    assert session.current_user.id == "user-1"
    assert session.is_authenticated


@pytest.mark.parametrize("username,password", [("Nobody", "password"), ("Sam Wilson", ""), ("Sam Wilson", None)])
def test_login_rejects_unknown_user_or_missing_password(session, username, password):
    assert session.login(username, password) is False
    assert session.current_user is None


def test_logout_clears_actor(session):
    session.login("Sam Wilson", "password")
    session.logout()

    assert not session.is_authenticated
    with pytest.raises(Unauthenticated):
        session.require_user()


def test_permissions_follow_role(session):
    assert not session.has_permission(Permission.MANAGE_ROOMS)

    session.login("Alex Johnson", "password")
    assert session.has_permission(Permission.MANAGE_ROOMS)
    assert session.has_permission(Permission.VIEW_ALL_BOOKINGS)
    assert not session.has_permission(Permission.MANAGE_SETTINGS)
    with pytest.raises(PermissionDenied):
        session.require_permission(Permission.MANAGE_SETTINGS)


def test_missing_role_grants_nothing(session, store):
    store.put_user(User(id="user-x", name="Drifter", email="d@example.com", role_id="role-gone"))
    session.login("Drifter", "password")

    assert not any(session.has_permission(p) for p in Permission)


def test_deleted_user_is_signed_out(session, store):
    session.login("Maria Garcia", "password")
    store.remove_user("user-3")

    assert session.current_user is None
