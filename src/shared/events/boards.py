"""Cross-domain event contracts for Boards domain events.

These classes define the event shape for consumption by other domains
(e.g., the Push domain to notify members about activity on their boards).
They are registered as external events via domain.register_external_event()
with matching __type__ strings so Protean's stream deserialization works
correctly.

Every contract carries the locale the producer rendered its own response
in, so consumers pick message wording without guessing.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Identifier, String, Text

DEFAULT_LOCALE = "ko"


class BoardBanned(BaseEvent):
    """A board was removed after reports or a policy violation."""

    __version__ = 1

    board_id = Identifier(required=True)
    writer_id = Identifier(required=True)
    locale = String(max_length=10, default=DEFAULT_LOCALE)
    banned_at = DateTime(required=True)


class BoardLiked(BaseEvent):
    """A member recommended someone's board."""

    __version__ = 1

    board_id = Identifier(required=True)
    liker_id = Identifier(required=True)
    locale = String(max_length=10, default=DEFAULT_LOCALE)
    liked_at = DateTime(required=True)


class ReplyLiked(BaseEvent):
    """A member recommended someone's reply."""

    __version__ = 1

    reply_id = Identifier(required=True)
    liker_id = Identifier(required=True)
    locale = String(max_length=10, default=DEFAULT_LOCALE)
    liked_at = DateTime(required=True)


class ReplyUploaded(BaseEvent):
    """A member replied to a board."""

    __version__ = 1

    reply_id = Identifier(required=True)
    board_id = Identifier(required=True)
    writer_id = Identifier(required=True)
    locale = String(max_length=10, default=DEFAULT_LOCALE)
    uploaded_at = DateTime(required=True)


class GuestBoardUploaded(BaseEvent):
    """A member left a response on another member's guest board."""

    __version__ = 1

    guest_board_id = Identifier(required=True)
    writer_id = Identifier(required=True)
    receiver_id = Identifier(required=True)
    content = Text(required=True)
    locale = String(max_length=10, default=DEFAULT_LOCALE)
    uploaded_at = DateTime(required=True)
