"""PushNotification aggregate — one record per Board activity event.

A push notification is rendered once, persisted once and never edited. The
only state change a member can make is confirming it as read:

    unconfirmed → confirmed

Ids are integers handed out by the notification store in creation order and
double as the read cursor for "everything newer than X" queries.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text
from push.domain import push
from push.notification.events import PushNotificationConfirmed, PushNotificationCreated


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationType(Enum):
    BOARD_BANNED = "BOARD_BANNED"
    BOARD_LIKE = "BOARD_LIKE"
    REPLY_LIKE_ANSWER = "REPLY_LIKE_ANSWER"
    REPLY_LIKE_INSPIRATION = "REPLY_LIKE_INSPIRATION"
    REPLY_LIKE_COWORKING = "REPLY_LIKE_COWORKING"
    REPLY_UPLOAD_ANSWER = "REPLY_UPLOAD_ANSWER"
    REPLY_UPLOAD_INSPIRATION = "REPLY_UPLOAD_INSPIRATION"
    REPLY_UPLOAD_COWORKING = "REPLY_UPLOAD_COWORKING"
    GUEST_BOARD_UPLOAD = "GUEST_BOARD_UPLOAD"


class BoardCategory(Enum):
    QUESTION = "QUESTION"
    INSPIRATION = "INSPIRATION"
    COWORKING = "COWORKING"


class EventKind(Enum):
    BOARD_BANNED = "BoardBanned"
    BOARD_LIKED = "BoardLiked"
    REPLY_LIKED = "ReplyLiked"
    REPLY_UPLOADED = "ReplyUploaded"
    GUEST_BOARD_UPLOADED = "GuestBoardUploaded"


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@push.aggregate
class PushNotification:
    """A rendered notification addressed to a single member."""

    id: Integer(identifier=True, min_value=1)

    # Recipient
    user_id: Identifier(required=True)

    # Content
    message: Text(required=True)
    notification_type: String(choices=NotificationType, required=True)

    # Read state
    confirmed: Boolean(default=False)

    # Timestamps
    created_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, notification_id, user_id, message, notification_type, created_at=None):
        """Create an unconfirmed notification with a store-assigned id."""
        if not message:
            raise ValidationError({"message": ["Notification message cannot be empty"]})

        now = created_at or datetime.now(UTC)

        notification = cls(
            id=notification_id,
            user_id=user_id,
            message=message,
            notification_type=notification_type,
            confirmed=False,
            created_at=now,
        )

        notification.raise_(
            PushNotificationCreated(
                notification_id=notification_id,
                user_id=str(user_id),
                notification_type=notification_type,
                created_at=now,
            )
        )

        return notification

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def confirm(self):
        """Mark the notification as read. Confirming twice is a no-op."""
        if self.confirmed:
            return

        self.confirmed = True

        self.raise_(
            PushNotificationConfirmed(
                notification_id=self.id,
                user_id=str(self.user_id),
                confirmed_at=datetime.now(UTC),
            )
        )

    def is_owned_by(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    def to_payload(self) -> dict:
        """The record as delivered to a member's live session."""
        return {
            "id": self.id,
            "user_id": str(self.user_id),
            "message": self.message,
            "notification_type": self.notification_type,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "confirmed": self.confirmed,
        }
