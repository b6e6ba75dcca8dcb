"""Domain events for the PushNotification aggregate."""

from protean.fields import DateTime, Identifier, Integer, String
from push.domain import push


@push.event(part_of="PushNotification")
class PushNotificationCreated:
    """A notification was recorded for a member."""

    __version__ = 1

    notification_id: Integer(required=True)
    user_id: Identifier(required=True)
    notification_type: String(required=True)
    created_at: DateTime(required=True)


@push.event(part_of="PushNotification")
class PushNotificationConfirmed:
    """A member confirmed (read) a notification."""

    __version__ = 1

    notification_id: Integer(required=True)
    user_id: Identifier(required=True)
    confirmed_at: DateTime(required=True)
