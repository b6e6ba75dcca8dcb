"""Notification store adapters."""

from push.store.memory import InMemoryNotificationStore
from push.store.port import NotificationStore
from push.store.repository import PushNotificationRepository, RepositoryNotificationStore

__all__ = [
    "InMemoryNotificationStore",
    "NotificationStore",
    "PushNotificationRepository",
    "RepositoryNotificationStore",
]
