"""In-process session registry — the live transport behind push delivery.

A connection layer (WebSocket or STOMP endpoint) registers one sender per
open session under the member's address and unregisters it on disconnect.
Delivery fans a payload out to every session of the address.
"""

import threading
from collections.abc import Callable

import structlog
from push.channel.delivery_port import DeliveryChannel
from push.notification.errors import DeliveryFailure

logger = structlog.get_logger(__name__)

Sender = Callable[[str, dict], None]


class SessionRegistryChannel(DeliveryChannel):
    """Delivery channel over senders registered per member address."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: dict[str, list[Sender]] = {}

    def connect(self, address: str, sender: Sender) -> None:
        with self._lock:
            self._sessions.setdefault(address, []).append(sender)

    def disconnect(self, address: str, sender: Sender) -> None:
        with self._lock:
            senders = self._sessions.get(address, [])
            if sender in senders:
                senders.remove(sender)
            if not senders:
                self._sessions.pop(address, None)

    def session_count(self, address: str) -> int:
        with self._lock:
            return len(self._sessions.get(address, []))

    def send_to_user(self, address: str, destination: str, payload: dict) -> None:
        with self._lock:
            senders = list(self._sessions.get(address, []))

        failures = 0
        for sender in senders:
            try:
                sender(destination, payload)
            except Exception as exc:
                failures += 1
                logger.debug("Session send failed", address=address, error=str(exc))

        if failures:
            raise DeliveryFailure(f"{failures} of {len(senders)} sessions failed for {address}")
