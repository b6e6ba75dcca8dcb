"""Inbound cross-domain event handler — Push reacts to guest board responses."""

from protean.utils.mixins import handle
from push.domain import push
from push.notification.notification import PushNotification
from push.wiring import get_dispatcher
from shared.events.boards import GuestBoardUploaded

push.register_external_event(GuestBoardUploaded, "Boards.GuestBoardUploaded.v1")


@push.event_handler(part_of=PushNotification, stream_category="boards::guest_board")
class GuestBoardEventsHandler:
    """Notifies the owner of a guest board when someone responds on it."""

    @handle(GuestBoardUploaded)
    def on_guest_board_uploaded(self, event: GuestBoardUploaded) -> None:
        get_dispatcher().dispatch(event)
