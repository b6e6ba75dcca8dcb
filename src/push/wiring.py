"""Dispatcher factory — the composition root for the Push domain.

Event handlers and HTTP routes are instantiated by Protean and FastAPI, so
they fetch the dispatcher from here. The dispatcher itself receives every
collaborator through its constructor:

- RepositoryNotificationStore over the configured Protean provider
- SessionRegistryChannel for live sessions
- in-memory member directory and board lookup until real adapters are set
"""

from push.channel.sessions import SessionRegistryChannel
from push.directory.fake_adapter import InMemoryBoardLookup, InMemoryUserDirectory
from push.notification.dispatcher import NotificationDispatcher
from push.settings import PushSettings
from push.store.repository import RepositoryNotificationStore

_current_dispatcher: NotificationDispatcher | None = None


def build_dispatcher(store=None, channel=None, users=None, boards=None, settings=None) -> NotificationDispatcher:
    """Build a dispatcher, filling unspecified collaborators with defaults."""
    return NotificationDispatcher(
        store=store or RepositoryNotificationStore(),
        channel=channel or SessionRegistryChannel(),
        users=users or InMemoryUserDirectory(),
        boards=boards or InMemoryBoardLookup(),
        settings=settings or PushSettings.from_env(),
    )


def get_dispatcher() -> NotificationDispatcher:
    """Return the current dispatcher. Built with defaults on first use."""
    global _current_dispatcher
    if _current_dispatcher is None:
        _current_dispatcher = build_dispatcher()
    return _current_dispatcher


def set_dispatcher(dispatcher: NotificationDispatcher) -> None:
    """Install a dispatcher (application startup, tests)."""
    global _current_dispatcher
    _current_dispatcher = dispatcher


def reset_dispatcher() -> None:
    """Close and forget the current dispatcher."""
    global _current_dispatcher
    if _current_dispatcher is not None:
        _current_dispatcher.close()
    _current_dispatcher = None
