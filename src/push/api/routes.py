"""FastAPI routes for the Push domain.

Thin adapters over the notification dispatcher's query side. Members are
identified by path; authentication happens in front of this router.
"""

from fastapi import APIRouter, HTTPException, Query
from push.api.schemas import (
    PushNotificationListResponse,
    PushNotificationResponse,
    StatusResponse,
    UnconfirmedCountResponse,
)
from push.notification.errors import ConfirmNotFound
from push.wiring import get_dispatcher

router = APIRouter(prefix="/push-notifications", tags=["push-notifications"])


@router.get("/{user_id}", response_model=PushNotificationListResponse)
async def get_newer_notifications(
    user_id: str,
    since_id: int = Query(0, ge=0),
) -> PushNotificationListResponse:
    """Notifications newer than ``since_id``, oldest first."""
    notifications = get_dispatcher().get_newer_notifications(since_id, user_id)
    return PushNotificationListResponse(
        notifications=[
            PushNotificationResponse(
                id=n.id,
                user_id=str(n.user_id),
                message=n.message,
                notification_type=n.notification_type,
                created_at=n.created_at,
                confirmed=n.confirmed,
            )
            for n in notifications
        ]
    )


@router.get("/{user_id}/unconfirmed-count", response_model=UnconfirmedCountResponse)
async def get_unconfirmed_count(user_id: str) -> UnconfirmedCountResponse:
    return UnconfirmedCountResponse(
        user_id=user_id,
        count=get_dispatcher().count_unconfirmed(user_id),
    )


@router.post("/{user_id}/{notification_id}/confirm", response_model=StatusResponse)
async def confirm_notification(user_id: str, notification_id: int) -> StatusResponse:
    """Confirm a notification. Unknown and foreign ids both answer 404."""
    try:
        get_dispatcher().confirm_notification(notification_id, user_id)
    except ConfirmNotFound:
        raise HTTPException(status_code=404, detail="Notification not found") from None
    return StatusResponse()
