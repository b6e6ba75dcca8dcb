"""Push domain API package."""

from push.api.routes import router

__all__ = ["router"]
