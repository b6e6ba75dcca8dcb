"""NotificationDispatcher — turns Board activity events into push notifications.

For every event the dispatcher:

1. resolves the recipient (and the actor's display name) through the member
   directory and board lookup,
2. renders the message from the template for the event kind and, for reply
   events, the parent board's category,
3. persists one PushNotification through the notification store,
4. hands the persisted record to the delivery channel, waiting at most
   ``settings.delivery_timeout`` seconds.

A persistence failure in step 3 propagates and skips step 4. A delivery
failure in step 4 is logged and dropped and leaves the stored record
untouched. Malformed events (unknown category or locale, missing member,
board or reply) are logged and dropped.

The dispatcher also serves the read side: cursor queries over a member's
notifications and confirmation.
"""

from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import assert_never

import structlog
from push.channel.delivery_port import DeliveryChannel
from push.directory.port import BoardLookup, BoardRecord, ReplyRecord, UserDirectory, UserRecord
from push.notification.errors import RecipientNotFound, UnsupportedCategory, UnsupportedLocale
from push.notification.notification import EventKind, PushNotification
from push.settings import PushSettings
from push.store.port import NotificationStore
from push.templates import resolve
from push.templates.base import excerpt
from shared.events.boards import BoardBanned, BoardLiked, GuestBoardUploaded, ReplyLiked, ReplyUploaded

logger = structlog.get_logger(__name__)

BoardEvent = BoardBanned | BoardLiked | ReplyLiked | ReplyUploaded | GuestBoardUploaded


class NotificationDispatcher:
    """Event-to-notification pipeline plus the notification query surface."""

    def __init__(
        self,
        store: NotificationStore,
        channel: DeliveryChannel,
        users: UserDirectory,
        boards: BoardLookup,
        settings: PushSettings | None = None,
    ) -> None:
        self.store = store
        self.channel = channel
        self.users = users
        self.boards = boards
        self.settings = settings or PushSettings()
        self._executor = ThreadPoolExecutor(
            max_workers=self.settings.delivery_workers,
            thread_name_prefix="push-delivery",
        )

    # -------------------------------------------------------------------
    # Event side
    # -------------------------------------------------------------------
    def dispatch(self, event: BoardEvent) -> PushNotification | None:
        """Route an event to its handler. Returns the stored notification, if any."""
        if isinstance(event, BoardBanned):
            return self.on_board_banned(event)
        elif isinstance(event, BoardLiked):
            return self.on_board_liked(event)
        elif isinstance(event, ReplyLiked):
            return self.on_reply_liked(event)
        elif isinstance(event, ReplyUploaded):
            return self.on_reply_uploaded(event)
        elif isinstance(event, GuestBoardUploaded):
            return self.on_guest_board_uploaded(event)
        else:
            assert_never(event)

    def on_board_banned(self, event: BoardBanned) -> PushNotification | None:
        """Send the compliance notice to the writer of a removed board."""
        try:
            writer = self._user(event.writer_id)
            template = resolve(EventKind.BOARD_BANNED)
            message = template.render(locale=event.locale)
        except (RecipientNotFound, UnsupportedLocale) as exc:
            return self._drop(EventKind.BOARD_BANNED, exc, board_id=str(event.board_id))

        return self._notify(writer, message, template.notification_type)

    def on_board_liked(self, event: BoardLiked) -> PushNotification | None:
        """Tell a board's writer that a member recommended it."""
        try:
            board = self._board(event.board_id)
            writer = self._user(board.writer_id)
            liker = self._user(event.liker_id)
            template = resolve(EventKind.BOARD_LIKED)
            message = template.render(
                actor=liker.name,
                snippet=self._snippet(board.title or board.content),
                locale=event.locale,
            )
        except (RecipientNotFound, UnsupportedLocale) as exc:
            return self._drop(EventKind.BOARD_LIKED, exc, board_id=str(event.board_id))

        return self._notify(writer, message, template.notification_type)

    def on_reply_liked(self, event: ReplyLiked) -> PushNotification | None:
        """Tell a reply's writer that a member recommended it.

        Wording follows the category of the board the reply belongs to.
        """
        try:
            reply = self._reply(event.reply_id)
            board = self._board(reply.board_id)
            writer = self._user(reply.writer_id)
            liker = self._user(event.liker_id)
            template = resolve(EventKind.REPLY_LIKED, board.category)
            message = template.render(
                actor=liker.name,
                snippet=self._snippet(reply.content),
                locale=event.locale,
            )
        except (RecipientNotFound, UnsupportedCategory, UnsupportedLocale) as exc:
            return self._drop(EventKind.REPLY_LIKED, exc, reply_id=str(event.reply_id))

        return self._notify(writer, message, template.notification_type)

    def on_reply_uploaded(self, event: ReplyUploaded) -> PushNotification | None:
        """Tell a board's writer that a member replied to it.

        Wording follows the board's category.
        """
        try:
            board = self._board(event.board_id)
            writer = self._user(board.writer_id)
            replier = self._user(event.writer_id)
            reply = self.boards.find_reply(str(event.reply_id))
            template = resolve(EventKind.REPLY_UPLOADED, board.category)
            message = template.render(
                actor=replier.name,
                snippet=self._snippet(reply.content if reply else ""),
                locale=event.locale,
            )
        except (RecipientNotFound, UnsupportedCategory, UnsupportedLocale) as exc:
            return self._drop(EventKind.REPLY_UPLOADED, exc, board_id=str(event.board_id))

        return self._notify(writer, message, template.notification_type)

    def on_guest_board_uploaded(self, event: GuestBoardUploaded) -> PushNotification | None:
        """Tell the owner of a guest board that a member left a response."""
        try:
            receiver = self._user(event.receiver_id)
            writer = self._user(event.writer_id)
            template = resolve(EventKind.GUEST_BOARD_UPLOADED)
            message = template.render(
                actor=writer.name,
                snippet=self._snippet(event.content),
                locale=event.locale,
            )
        except (RecipientNotFound, UnsupportedLocale) as exc:
            return self._drop(
                EventKind.GUEST_BOARD_UPLOADED,
                exc,
                guest_board_id=str(event.guest_board_id),
            )

        return self._notify(receiver, message, template.notification_type)

    # -------------------------------------------------------------------
    # Query side
    # -------------------------------------------------------------------
    def get_newer_notifications(self, since_id: int, user_id: str) -> list[PushNotification]:
        """The member's notifications with ``id > since_id``, ascending by id."""
        return self.store.find_newer_than(str(user_id), since_id)

    def confirm_notification(self, notification_id: int, user_id: str) -> PushNotification:
        """Confirm a notification. Raises ConfirmNotFound for unknown or foreign ids."""
        notification = self.store.mark_confirmed(notification_id, str(user_id))
        logger.info(
            "Push notification confirmed",
            notification_id=notification_id,
            user_id=str(user_id),
        )
        return notification

    def count_unconfirmed(self, user_id: str) -> int:
        return self.store.count_unconfirmed(str(user_id))

    def close(self) -> None:
        """Stop the delivery pool without waiting for abandoned deliveries."""
        self._executor.shutdown(wait=False, cancel_futures=True)

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------
    def _user(self, user_id) -> UserRecord:
        user = self.users.find_user(str(user_id))
        if user is None:
            raise RecipientNotFound("User", user_id)
        return user

    def _board(self, board_id) -> BoardRecord:
        board = self.boards.find_board(str(board_id))
        if board is None:
            raise RecipientNotFound("Board", board_id)
        return board

    def _reply(self, reply_id) -> ReplyRecord:
        reply = self.boards.find_reply(str(reply_id))
        if reply is None:
            raise RecipientNotFound("Reply", reply_id)
        return reply

    def _snippet(self, text: str | None) -> str:
        return excerpt(text, self.settings.snippet_length)

    def _drop(self, event_kind: EventKind, exc: Exception, **context) -> None:
        logger.warning(
            "Push notification dropped",
            event_kind=event_kind.value,
            reason=type(exc).__name__,
            error=str(exc),
            **context,
        )
        return None

    def _notify(self, recipient: UserRecord, message: str, notification_type: str) -> PushNotification:
        # PersistenceFailure propagates from here; nothing is delivered unless stored
        notification = self.store.save(recipient.user_id, message, notification_type)

        logger.info(
            "Push notification created",
            notification_id=notification.id,
            user_id=recipient.user_id,
            notification_type=notification_type,
        )

        self._deliver(recipient.email, notification)
        return notification

    def _deliver(self, address: str, notification: PushNotification) -> None:
        try:
            future = self._executor.submit(
                self.channel.send_to_user,
                address,
                self.settings.destination,
                notification.to_payload(),
            )
            future.result(timeout=self.settings.delivery_timeout)
        except FutureTimeoutError:
            # A delivery still queued behind a stalled transport never starts
            future.cancel()
            logger.debug(
                "Push delivery timed out, dropped",
                notification_id=notification.id,
                timeout=self.settings.delivery_timeout,
            )
        except Exception as exc:
            logger.debug(
                "Push delivery failed, dropped",
                notification_id=notification.id,
                error=str(exc),
            )
