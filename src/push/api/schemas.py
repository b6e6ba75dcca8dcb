"""Pydantic response models for the Push API."""

from datetime import datetime

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str = "ok"


class PushNotificationResponse(BaseModel):
    id: int
    user_id: str
    message: str
    notification_type: str
    created_at: datetime | None = None
    confirmed: bool


class PushNotificationListResponse(BaseModel):
    notifications: list[PushNotificationResponse]


class UnconfirmedCountResponse(BaseModel):
    user_id: str
    count: int
