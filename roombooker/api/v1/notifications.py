from fastapi import APIRouter, Depends

from roombooker.api.v1.schemas import NotificationSchema
from roombooker.infrastructure.notifications.notification_center import NotificationCenter
from roombooker.wiring.dependencies import get_notification_center

router = APIRouter()


@router.get("/current", response_model=NotificationSchema | None)
def current_notification(center: NotificationCenter = Depends(get_notification_center)):
    notification = center.current()
    return NotificationSchema.from_entity(notification) if notification else None


@router.delete("/current", status_code=204)
def dismiss_notification(center: NotificationCenter = Depends(get_notification_center)) -> None:
    center.dismiss()
