from __future__ import annotations

import logging

from roombooker.application.exceptions import PermissionDenied, Unauthenticated
from roombooker.application.ports.store import StorePort
from roombooker.domain.entities.role import Permission
from roombooker.domain.entities.user import User


class SessionUseCase:
    """The signed-in actor of this process. Password checks are simulated."""

    def __init__(self, store: StorePort) -> None:
        self._store = store
        self._current_user_id: str | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def current_user(self) -> User | None:
        if self._current_user_id is None:
            return None
        # The user may have been deleted while signed in.
        return self._store.get_user(self._current_user_id)

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def login(self, username: str, password: str | None = None) -> bool:
        wanted = username.strip().lower()
        user = next((u for u in self._store.list_users() if u.name.lower() == wanted), None)
        if user is None or not password:
            self._logger.info("Login rejected", extra={"reason": "unknown user or empty password"})
            return False
        self._current_user_id = user.id
        self._logger.info("Login succeeded", extra={"user_id": user.id})
        return True

    def logout(self) -> None:
        if self._current_user_id is not None:
            self._logger.info("Logout", extra={"user_id": self._current_user_id})
        self._current_user_id = None

    def require_user(self) -> User:
        user = self.current_user
        if user is None:
            raise Unauthenticated("Sign in to manage bookings.")
        return user

    def has_permission(self, permission: Permission) -> bool:
        user = self.current_user
        if user is None:
            return False
        role = self._store.get_role(user.role_id)
        return role is not None and role.grants(permission)

    def require_permission(self, permission: Permission) -> User:
        user = self.require_user()
        if not self.has_permission(permission):
            raise PermissionDenied(f"Missing permission '{permission.value}'")
        return user
