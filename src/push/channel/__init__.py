"""Delivery channel adapters for live session push."""

from push.channel.delivery_port import DeliveryChannel
from push.channel.fake_delivery import FakeDeliveryChannel
from push.channel.sessions import SessionRegistryChannel

__all__ = ["DeliveryChannel", "FakeDeliveryChannel", "SessionRegistryChannel"]
