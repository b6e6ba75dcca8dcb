"""In-memory notification store: a lock-guarded dict for development and testing."""

import threading

from push.notification.errors import ConfirmNotFound
from push.notification.notification import PushNotification
from push.store.port import NotificationStore


class InMemoryNotificationStore(NotificationStore):
    """Notification store that keeps rows in process memory."""

    def __init__(self):
        self._lock = threading.Lock()
        self._last_id = 0
        self.rows: dict[int, PushNotification] = {}

    def save(self, user_id: str, message: str, notification_type: str) -> PushNotification:
        with self._lock:
            notification = PushNotification.create(
                notification_id=self._last_id + 1,
                user_id=str(user_id),
                message=message,
                notification_type=notification_type,
            )
            self.rows[notification.id] = notification
            self._last_id = notification.id
            return notification

    def find_newer_than(self, user_id: str, since_id: int) -> list[PushNotification]:
        with self._lock:
            matching = [n for n in self.rows.values() if n.id > since_id and n.is_owned_by(user_id)]
        return sorted(matching, key=lambda n: n.id)

    def mark_confirmed(self, notification_id: int, user_id: str) -> PushNotification:
        with self._lock:
            notification = self.rows.get(notification_id)
            if notification is None or not notification.is_owned_by(user_id):
                raise ConfirmNotFound(notification_id)
            notification.confirm()
            return notification

    def reset(self):
        """Drop all rows and restart the id sequence."""
        with self._lock:
            self.rows.clear()
            self._last_id = 0
