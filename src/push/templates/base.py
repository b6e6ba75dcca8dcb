"""Shared rendering for push message templates."""

from push.notification.errors import UnsupportedLocale


def excerpt(text: str | None, length: int) -> str:
    """Collapse whitespace and cut ``text`` to ``length`` characters."""
    if not text:
        return ""
    collapsed = " ".join(text.split())
    if len(collapsed) <= length:
        return collapsed
    return collapsed[:length].rstrip() + "..."


class MessageTemplate:
    """A message per locale with optional ``{actor}`` and ``{snippet}`` slots."""

    notification_type: str
    messages: dict[str, str] = {}

    @classmethod
    def render(cls, actor: str | None = None, snippet: str | None = None, locale: str = "ko") -> str:
        message = cls.messages.get(locale)
        if message is None:
            raise UnsupportedLocale(locale, cls.__name__)
        return message.format(actor=actor or "", snippet=snippet or "").strip()
