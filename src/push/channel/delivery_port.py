"""Delivery channel port — abstract interface for live session delivery."""

from abc import ABC, abstractmethod


class DeliveryChannel(ABC):
    """Abstract interface for publishing to a member's live session(s)."""

    @abstractmethod
    def send_to_user(self, address: str, destination: str, payload: dict) -> None:
        """Publish ``payload`` to every live session of ``address``.

        Does nothing when the member has no live session. Transport errors
        are raised; callers treat delivery as best effort.
        """
        ...
