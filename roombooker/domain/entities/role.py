from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Permission(str, Enum):
    MANAGE_ROOMS = "manageRooms"
    MANAGE_SETTINGS = "manageSettings"
    VIEW_ALL_BOOKINGS = "viewAllBookings"


@dataclass(frozen=True)
class Role:
    id: str
    name: str
    permissions: frozenset[Permission] = field(default_factory=frozenset)

    def grants(self, permission: Permission) -> bool:
        return permission in self.permissions
