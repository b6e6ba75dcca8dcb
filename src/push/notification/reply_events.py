"""Inbound cross-domain event handler — Push reacts to Reply events.

Listens for ReplyLiked and ReplyUploaded. Message wording for both depends
on the category of the board the reply belongs to.
"""

from protean.utils.mixins import handle
from push.domain import push
from push.notification.notification import PushNotification
from push.wiring import get_dispatcher
from shared.events.boards import ReplyLiked, ReplyUploaded

push.register_external_event(ReplyLiked, "Boards.ReplyLiked.v1")
push.register_external_event(ReplyUploaded, "Boards.ReplyUploaded.v1")


@push.event_handler(part_of=PushNotification, stream_category="boards::reply")
class ReplyEventsHandler:
    """Reacts to reply activity to notify reply and board writers."""

    @handle(ReplyLiked)
    def on_reply_liked(self, event: ReplyLiked) -> None:
        get_dispatcher().dispatch(event)

    @handle(ReplyUploaded)
    def on_reply_uploaded(self, event: ReplyUploaded) -> None:
        get_dispatcher().dispatch(event)
