"""Runtime settings for push dispatch, read from environment variables."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class PushSettings:
    """Tunables for rendering and live delivery."""

    destination: str = "/queue/notification"
    delivery_timeout: float = 2.0  # seconds the handler waits on the transport
    delivery_workers: int = 4
    snippet_length: int = 30

    @classmethod
    def from_env(cls, environ=None) -> "PushSettings":
        env = os.environ if environ is None else environ
        return cls(
            destination=env.get("PUSH_DESTINATION", cls.destination),
            delivery_timeout=float(env.get("PUSH_DELIVERY_TIMEOUT", cls.delivery_timeout)),
            delivery_workers=int(env.get("PUSH_DELIVERY_WORKERS", cls.delivery_workers)),
            snippet_length=int(env.get("PUSH_SNIPPET_LENGTH", cls.snippet_length)),
        )
