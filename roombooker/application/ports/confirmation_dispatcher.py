from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from roombooker.domain.entities.booking import Booking
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.user import User


class ConfirmationDispatcherPort(ABC):
    @abstractmethod
    def dispatch_created(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        """Tell the booking's owner that it was confirmed."""
        raise NotImplementedError

    @abstractmethod
    def dispatch_updated(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        raise NotImplementedError

    @abstractmethod
    def dispatch_cancelled(self, booking: Booking, users: Sequence[User], rooms: Sequence[Room]) -> None:
        """`booking` is the snapshot taken before removal."""
        raise NotImplementedError
