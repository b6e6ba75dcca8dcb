"""Inbound cross-domain event handler — Push reacts to Board events.

Listens for BoardBanned (moderation removed a board) and BoardLiked
(a member recommended a board).
"""

import structlog
from protean.utils.mixins import handle
from push.domain import push
from push.notification.notification import PushNotification
from push.wiring import get_dispatcher
from shared.events.boards import BoardBanned, BoardLiked

logger = structlog.get_logger(__name__)

push.register_external_event(BoardBanned, "Boards.BoardBanned.v1")
push.register_external_event(BoardLiked, "Boards.BoardLiked.v1")


@push.event_handler(part_of=PushNotification, stream_category="boards::board")
class BoardEventsHandler:
    """Reacts to Boards domain events to notify board writers."""

    @handle(BoardBanned)
    def on_board_banned(self, event: BoardBanned) -> None:
        """Notify the writer that their board was removed."""
        get_dispatcher().dispatch(event)

    @handle(BoardLiked)
    def on_board_liked(self, event: BoardLiked) -> None:
        """Notify the writer that their board was recommended."""
        get_dispatcher().dispatch(event)
