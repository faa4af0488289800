import logging

from fastapi import FastAPI

from roombooker.api.v1.auth import router as auth_router
from roombooker.api.v1.bookings import router as bookings_router
from roombooker.api.v1.directory import router as directory_router
from roombooker.api.v1.notifications import router as notifications_router
from roombooker.api.v1.rooms import router as rooms_router
from roombooker.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("booking_id", "room_id", "user_id", "severity", "status", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Room Booker", version="1.0.0")

app.include_router(auth_router, prefix="/v1/auth", tags=["auth"])
app.include_router(bookings_router, prefix="/v1/bookings", tags=["bookings"])
app.include_router(rooms_router, prefix="/v1/rooms", tags=["rooms"])
app.include_router(directory_router, prefix="/v1", tags=["directory"])
app.include_router(notifications_router, prefix="/v1/notifications", tags=["notifications"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
