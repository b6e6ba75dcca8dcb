"""Fake delivery channel: records delivery attempts for testing."""

import time

from push.channel.delivery_port import DeliveryChannel
from push.notification.errors import DeliveryFailure


class FakeDeliveryChannel(DeliveryChannel):
    """Delivery channel that records payloads in memory for test assertions.

    ``attempts`` holds every call. ``delivered`` holds only the calls that
    reached a connected address.
    """

    def __init__(self):
        self.connected: set[str] = set()
        self.attempts: list[dict] = []
        self.delivered: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Delivery failed"
        self.delay = 0.0

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Delivery failed",
        delay: float = 0.0,
    ):
        """Configure the fake channel behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.delay = delay

    def connect(self, address: str):
        self.connected.add(address)

    def disconnect(self, address: str):
        self.connected.discard(address)

    def send_to_user(self, address: str, destination: str, payload: dict) -> None:
        record = {
            "address": address,
            "destination": destination,
            "payload": payload,
        }
        self.attempts.append(record)

        if self.delay:
            time.sleep(self.delay)

        if not self.should_succeed:
            raise DeliveryFailure(self.failure_reason)

        if address in self.connected:
            self.delivered.append(record)

    def reset(self):
        """Clear recorded deliveries (useful between tests)."""
        self.connected.clear()
        self.attempts.clear()
        self.delivered.clear()
        self.should_succeed = True
        self.failure_reason = "Delivery failed"
        self.delay = 0.0
