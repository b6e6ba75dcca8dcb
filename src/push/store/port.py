"""Notification store port — abstract interface for push notification persistence."""

from abc import ABC, abstractmethod

from push.notification.notification import PushNotification


class NotificationStore(ABC):
    """Abstract interface for notification persistence.

    Implementations must hand out ids atomically and in strictly increasing
    order, and must confirm atomically per (notification_id, user_id).
    """

    @abstractmethod
    def save(self, user_id: str, message: str, notification_type: str) -> PushNotification:
        """Assign the next id, persist an unconfirmed notification and return it.

        Every call produces its own row. Near-identical notifications are
        never coalesced.

        Raises:
            PersistenceFailure: when the write could not be made durable.
        """
        ...

    @abstractmethod
    def find_newer_than(self, user_id: str, since_id: int) -> list[PushNotification]:
        """Return the member's notifications with ``id > since_id``, ascending by id."""
        ...

    @abstractmethod
    def mark_confirmed(self, notification_id: int, user_id: str) -> PushNotification:
        """Confirm a notification owned by ``user_id``. Idempotent.

        Raises:
            ConfirmNotFound: when the id does not exist or belongs to another member.
        """
        ...

    def count_unconfirmed(self, user_id: str) -> int:
        return sum(1 for n in self.find_newer_than(user_id, 0) if not n.confirmed)
