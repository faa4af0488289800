from __future__ import annotations

from datetime import date, datetime

from fastapi import APIRouter, Depends, Query, Response

from roombooker.api.v1.errors import raise_http
from roombooker.api.v1.schemas import BookingRequestSchema, BookingSchema
from roombooker.application.exceptions import BookingError, PermissionDenied
from roombooker.application.use_cases.booking_lifecycle import BookingLifecycleUseCase
from roombooker.application.use_cases.session import SessionUseCase
from roombooker.wiring.dependencies import get_booking_use_case, get_session

router = APIRouter()


@router.get("", response_model=list[BookingSchema])
def list_bookings(
    day: date | None = Query(None),
    room_id: str | None = Query(None),
    uc: BookingLifecycleUseCase = Depends(get_booking_use_case),
):
    """Upcoming bookings for the dashboard, or every booking starting on `day` for the calendar."""
    if day is not None:
        bookings = uc.list_for_day(day, room_id=room_id)
    else:
        bookings = uc.list_upcoming(datetime.now())
        if room_id is not None:
            bookings = [b for b in bookings if b.room_id == room_id]
    return [BookingSchema.from_entity(b) for b in bookings]


@router.post("", response_model=BookingSchema, status_code=201)
async def create_booking(
    req: BookingRequestSchema,
    uc: BookingLifecycleUseCase = Depends(get_booking_use_case),
):
    try:
        booking = await uc.create(req.to_draft())
    except BookingError as e:
        raise_http(e)
    return BookingSchema.from_entity(booking)


@router.get("/{booking_id}", response_model=BookingSchema)
def get_booking(booking_id: str, uc: BookingLifecycleUseCase = Depends(get_booking_use_case)):
    try:
        return BookingSchema.from_entity(uc.get(booking_id))
    except BookingError as e:
        raise_http(e)


@router.put("/{booking_id}", response_model=BookingSchema)
async def update_booking(
    booking_id: str,
    req: BookingRequestSchema,
    uc: BookingLifecycleUseCase = Depends(get_booking_use_case),
    session: SessionUseCase = Depends(get_session),
):
    try:
        session.require_user()
        if not uc.can_modify(uc.get(booking_id)):
            raise PermissionDenied("Only the owner or a room manager can edit this booking.")
        booking = await uc.update(booking_id, req.to_draft())
    except BookingError as e:
        raise_http(e)
    return BookingSchema.from_entity(booking)


@router.delete("/{booking_id}", status_code=204)
async def delete_booking(
    booking_id: str,
    uc: BookingLifecycleUseCase = Depends(get_booking_use_case),
    session: SessionUseCase = Depends(get_session),
) -> Response:
    try:
        session.require_user()
        existing = uc.find(booking_id)
        if existing is not None and not uc.can_modify(existing):
            raise PermissionDenied("Only the owner or a room manager can delete this booking.")
        await uc.delete(booking_id)
    except BookingError as e:
        raise_http(e)
    return Response(status_code=204)
