from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from roombooker.domain.entities.booking import Booking, BookingDraft
from roombooker.domain.entities.notification import Notification
from roombooker.domain.entities.role import Permission, Role
from roombooker.domain.entities.room import Room
from roombooker.domain.entities.room_status import RoomStatus, RoomStatusKind
from roombooker.domain.entities.slot import Segment, Slot, TimelineBlock
from roombooker.domain.entities.user import User


class LoginRequestSchema(BaseModel):
    username: str
    password: str = ""


class SessionSchema(BaseModel):
    authenticated: bool
    user: UserSchema | None = None
    permissions: list[Permission] = Field(default_factory=list)


class BookingRequestSchema(BaseModel):
    room_id: str
    title: str = Field(min_length=1)
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time")
    @classmethod
    def check_wall_clock(cls, value: datetime) -> datetime:
        # Bookings are stored as local wall-clock times and compared with naive values.
        if value.utcoffset() is not None:
            raise ValueError("Times must be local wall-clock values without a UTC offset.")
        return value

    @model_validator(mode="after")
    def check_order(self) -> BookingRequestSchema:
        if self.end_time <= self.start_time:
            raise ValueError("End time must be after start time.")
        return self

    def to_draft(self) -> BookingDraft:
        return BookingDraft(
            room_id=self.room_id,
            title=self.title,
            start_time=self.start_time,
            end_time=self.end_time,
        )


class BookingSchema(BaseModel):
    id: str
    user_id: str
    room_id: str
    title: str
    start_time: datetime
    end_time: datetime

    @classmethod
    def from_entity(cls, booking: Booking) -> BookingSchema:
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            room_id=booking.room_id,
            title=booking.title,
            start_time=booking.start_time,
            end_time=booking.end_time,
        )


class RoomRequestSchema(BaseModel):
    name: str = Field(min_length=1)
    capacity: int = Field(gt=0)
    amenities: list[str] = Field(default_factory=list)
    photo_url: str = ""


class RoomSchema(BaseModel):
    id: str
    name: str
    capacity: int
    amenities: list[str]
    photo_url: str

    @classmethod
    def from_entity(cls, room: Room) -> RoomSchema:
        return cls(
            id=room.id,
            name=room.name,
            capacity=room.capacity,
            amenities=sorted(room.amenities),
            photo_url=room.photo_url,
        )


class RoomStatusSchema(BaseModel):
    room_id: str
    status: RoomStatusKind
    booking: BookingSchema | None = None

    @classmethod
    def from_status(cls, room_id: str, status: RoomStatus) -> RoomStatusSchema:
        booking = getattr(status, "booking", None)
        return cls(
            room_id=room_id,
            status=status.kind,
            booking=BookingSchema.from_entity(booking) if booking else None,
        )


class SlotSchema(BaseModel):
    start: datetime
    end: datetime
    free: bool
    booking_id: str | None = None

    @classmethod
    def from_slot(cls, slot: Slot | Segment) -> SlotSchema:
        return cls(
            start=slot.start,
            end=slot.end,
            free=slot.is_free,
            booking_id=slot.booking.id if slot.booking else None,
        )


class TimelineBlockSchema(BaseModel):
    booking: BookingSchema
    left_pct: float
    width_pct: float

    @classmethod
    def from_block(cls, block: TimelineBlock) -> TimelineBlockSchema:
        return cls(
            booking=BookingSchema.from_entity(block.booking),
            left_pct=round(block.left_pct, 4),
            width_pct=round(block.width_pct, 4),
        )


class UserRequestSchema(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    role_id: str


class UserSchema(BaseModel):
    id: str
    name: str
    email: str
    role_id: str

    @classmethod
    def from_entity(cls, user: User) -> UserSchema:
        return cls(id=user.id, name=user.name, email=user.email, role_id=user.role_id)


class UserRoleRequestSchema(BaseModel):
    role_id: str


class RoleSchema(BaseModel):
    id: str
    name: str
    permissions: list[Permission]

    @classmethod
    def from_entity(cls, role: Role) -> RoleSchema:
        return cls(id=role.id, name=role.name, permissions=sorted(role.permissions, key=lambda p: p.value))


class RolePermissionsRequestSchema(BaseModel):
    permissions: list[Permission] = Field(default_factory=list)


class NotificationSchema(BaseModel):
    message: str
    type: str
    key: str
    expires_at: float

    @classmethod
    def from_entity(cls, notification: Notification) -> NotificationSchema:
        return cls(
            message=notification.message,
            type=notification.severity.value,
            key=notification.key,
            expires_at=notification.expires_at,
        )


SessionSchema.model_rebuild()
