from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roombooker.domain.entities.booking import Booking


class BookingError(Exception):
    """Base class for booking outcomes the user can recover from."""
    pass


class Unauthenticated(BookingError):
    """Raised when a mutation needs a signed-in actor and there is none."""
    pass


class PermissionDenied(BookingError):
    pass


class NotFound(BookingError):
    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} '{entity_id}' not found")
        self.entity = entity
        self.entity_id = entity_id


class SchedulingConflict(BookingError):
    def __init__(self, conflict: Booking) -> None:
        super().__init__(
            f"Room '{conflict.room_id}' is already booked by '{conflict.id}' "
            f"from {conflict.start_time.isoformat()} to {conflict.end_time.isoformat()}"
        )
        self.conflict = conflict


class InvalidDuration(BookingError):
    pass


class DispatchError(RuntimeError):
    """Raised when a confirmation cannot be delivered (missing user/room, transport failure)."""
    pass
