from __future__ import annotations

from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from roombooker.api.v1.errors import raise_http
from roombooker.api.v1.schemas import (
    RoomRequestSchema,
    RoomSchema,
    RoomStatusSchema,
    SlotSchema,
    TimelineBlockSchema,
)
from roombooker.application.exceptions import BookingError
from roombooker.application.ports.store import StorePort
from roombooker.application.use_cases.directory import DirectoryUseCase
from roombooker.application.use_cases.session import SessionUseCase
from roombooker.application.utils.room_status import resolve_all
from roombooker.application.utils.slot_grid import build_timeline, generate_slots, segments
from roombooker.core.config import settings
from roombooker.domain.entities.role import Permission
from roombooker.domain.entities.room import Room
from roombooker.wiring.dependencies import get_directory_use_case, get_session, get_store

router = APIRouter()


def _require_room(store: StorePort, room_id: str) -> Room:
    room = store.get_room(room_id)
    if room is None:
        raise HTTPException(status_code=404, detail=f"Room '{room_id}' not found")
    return room


@router.get("", response_model=list[RoomSchema])
def list_rooms(store: StorePort = Depends(get_store)):
    return [RoomSchema.from_entity(r) for r in store.list_rooms()]


@router.get("/status", response_model=list[RoomStatusSchema])
def room_statuses(store: StorePort = Depends(get_store)):
    statuses = resolve_all(store.list_rooms(), store.list_bookings(), datetime.now())
    return [RoomStatusSchema.from_status(room_id, status) for room_id, status in statuses.items()]


@router.get("/{room_id}/slots", response_model=list[SlotSchema])
def room_slots(
    room_id: str,
    day: date = Query(...),
    exclude_booking_id: str | None = Query(None),
    merge: bool = Query(False, description="Collapse adjacent slots into segments"),
    store: StorePort = Depends(get_store),
):
    _require_room(store, room_id)
    slots = generate_slots(
        room_id,
        day,
        store.list_bookings(),
        window_start_hour=settings.WORK_DAY_START_HOUR,
        window_end_hour=settings.WORK_DAY_END_HOUR,
        step_minutes=settings.SLOT_MINUTES,
        exclude_id=exclude_booking_id,
    )
    if merge:
        return [SlotSchema.from_slot(s) for s in segments(slots)]
    return [SlotSchema.from_slot(s) for s in slots]


@router.get("/{room_id}/timeline", response_model=list[TimelineBlockSchema])
def room_timeline(
    room_id: str,
    day: date = Query(...),
    store: StorePort = Depends(get_store),
):
    _require_room(store, room_id)
    blocks = build_timeline(
        room_id,
        day,
        store.list_bookings(),
        window_start_hour=settings.WORK_DAY_START_HOUR,
        window_end_hour=settings.WORK_DAY_END_HOUR,
    )
    return [TimelineBlockSchema.from_block(b) for b in blocks]


@router.post("", response_model=RoomSchema, status_code=201)
async def add_room(
    req: RoomRequestSchema,
    uc: DirectoryUseCase = Depends(get_directory_use_case),
    session: SessionUseCase = Depends(get_session),
):
    try:
        session.require_permission(Permission.MANAGE_ROOMS)
        room = await uc.add_room(req.name, req.capacity, req.amenities, req.photo_url)
    except BookingError as e:
        raise_http(e)
    return RoomSchema.from_entity(room)


@router.put("/{room_id}", response_model=RoomSchema)
async def update_room(
    room_id: str,
    req: RoomRequestSchema,
    uc: DirectoryUseCase = Depends(get_directory_use_case),
    session: SessionUseCase = Depends(get_session),
):
    try:
        session.require_permission(Permission.MANAGE_ROOMS)
        room = await uc.update_room(
            Room(
                id=room_id,
                name=req.name,
                capacity=req.capacity,
                amenities=frozenset(req.amenities),
                photo_url=req.photo_url,
            )
        )
    except BookingError as e:
        raise_http(e)
    return RoomSchema.from_entity(room)


@router.delete("/{room_id}", status_code=204)
async def delete_room(
    room_id: str,
    uc: DirectoryUseCase = Depends(get_directory_use_case),
    session: SessionUseCase = Depends(get_session),
) -> Response:
    try:
        session.require_permission(Permission.MANAGE_ROOMS)
        await uc.delete_room(room_id)
    except BookingError as e:
        raise_http(e)
    return Response(status_code=204)
