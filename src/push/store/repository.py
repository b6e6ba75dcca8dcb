"""Repository-backed notification store — persists through Protean's repository.

Works against whichever provider the Push domain is configured with
(memory by default, SQLite or PostgreSQL in deployed environments).
"""

import threading

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from push.domain import push
from push.notification.errors import ConfirmNotFound, PersistenceFailure
from push.notification.notification import PushNotification
from push.store.port import NotificationStore

logger = structlog.get_logger(__name__)


@push.repository(part_of=PushNotification)
class PushNotificationRepository:
    """Repository for PushNotification with cursor queries."""

    def find_for_user(self, user_id: str, since_id: int = 0, limit: int = 100) -> list[PushNotification]:
        """One page of the member's notifications newer than ``since_id``."""
        return (
            self._dao.query.filter(user_id=str(user_id), id__gt=since_id)
            .order_by("id")
            .limit(limit)
            .all()
            .items
        )

    def last_id(self) -> int:
        """Highest persisted id, or 0 when the table is empty."""
        latest = self._dao.query.order_by("-id").limit(1).all().first
        return latest.id if latest else 0


class RepositoryNotificationStore(NotificationStore):
    """Notification store over the PushNotification repository.

    The id sequence is seeded from the highest persisted id on first save
    and advanced under a process-wide lock. A failed insert drops the cached
    id and retries once, so a row written by another store is skipped over.
    """

    page_size = 100

    def __init__(self):
        self._lock = threading.Lock()
        self._last_id: int | None = None

    def _repository(self) -> PushNotificationRepository:
        return current_domain.repository_for(PushNotification)

    def save(self, user_id: str, message: str, notification_type: str) -> PushNotification:
        with self._lock:
            for attempt in (1, 2):
                try:
                    return self._insert(user_id, message, notification_type)
                except PersistenceFailure:
                    # Another writer may own the cached next id; re-seed from storage
                    self._last_id = None
                    if attempt == 2:
                        raise

    def _insert(self, user_id: str, message: str, notification_type: str) -> PushNotification:
        repo = self._repository()
        if self._last_id is None:
            self._last_id = repo.last_id()

        notification = PushNotification.create(
            notification_id=self._last_id + 1,
            user_id=str(user_id),
            message=message,
            notification_type=notification_type,
        )

        try:
            repo.add(notification)
        except Exception as exc:
            logger.error(
                "Failed to persist push notification",
                user_id=str(user_id),
                notification_id=notification.id,
                error=str(exc),
            )
            raise PersistenceFailure(str(exc)) from exc

        self._last_id = notification.id
        return notification

    def find_newer_than(self, user_id: str, since_id: int) -> list[PushNotification]:
        repo = self._repository()
        results: list[PushNotification] = []
        cursor = since_id

        # Page by id so the provider's default result limit never skips rows
        while True:
            page = repo.find_for_user(user_id, since_id=cursor, limit=self.page_size)
            results.extend(page)
            if len(page) < self.page_size:
                return results
            cursor = page[-1].id

    def mark_confirmed(self, notification_id: int, user_id: str) -> PushNotification:
        with self._lock:
            repo = self._repository()
            try:
                notification = repo.get(notification_id)
            except ObjectNotFoundError:
                raise ConfirmNotFound(notification_id) from None

            if not notification.is_owned_by(user_id):
                raise ConfirmNotFound(notification_id)

            if not notification.confirmed:
                notification.confirm()
                repo.add(notification)

            return notification
