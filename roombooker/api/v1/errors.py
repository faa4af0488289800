from __future__ import annotations

from typing import NoReturn

from fastapi import HTTPException

from roombooker.application.exceptions import (
    BookingError,
    InvalidDuration,
    NotFound,
    PermissionDenied,
    SchedulingConflict,
    Unauthenticated,
)


def raise_http(e: BookingError) -> NoReturn:
    """Translate a booking outcome into the matching HTTP error."""
    if isinstance(e, Unauthenticated):
        raise HTTPException(status_code=401, detail=str(e))
    if isinstance(e, PermissionDenied):
        raise HTTPException(status_code=403, detail=str(e))
    if isinstance(e, NotFound):
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, SchedulingConflict):
        raise HTTPException(
            status_code=409,
            detail={"message": str(e), "conflicting_booking_id": e.conflict.id},
        )
    if isinstance(e, InvalidDuration):
        raise HTTPException(status_code=422, detail=str(e))
    raise HTTPException(status_code=400, detail=str(e))
