"""Application tests for reply events: wording branches on the parent board's category."""

from datetime import UTC, datetime

import pytest
from push.notification.notification import NotificationType
from shared.events.boards import ReplyLiked, ReplyUploaded
from structlog.testing import capture_logs


def _reply_liked(reply_id, **overrides):
    fields = {"reply_id": reply_id, "liker_id": "u-guest", "liked_at": datetime.now(UTC)}
    fields.update(overrides)
    return ReplyLiked(**fields)


def _reply_uploaded(board_id, **overrides):
    fields = {
        "reply_id": f"r-{board_id[2:]}",
        "board_id": board_id,
        "writer_id": "u-fan",
        "uploaded_at": datetime.now(UTC),
    }
    fields.update(overrides)
    return ReplyUploaded(**fields)


class TestReplyLiked:
    @pytest.mark.parametrize(
        "reply_id, expected_type",
        [
            ("r-question", NotificationType.REPLY_LIKE_ANSWER),
            ("r-inspiration", NotificationType.REPLY_LIKE_INSPIRATION),
            ("r-coworking", NotificationType.REPLY_LIKE_COWORKING),
        ],
    )
    def test_type_follows_board_category(self, dispatcher, store, reply_id, expected_type):
        dispatcher.dispatch(_reply_liked(reply_id))

        rows = store.find_newer_than("u-fan", 0)
        assert len(rows) == 1
        assert rows[0].notification_type == expected_type.value

    def test_recipient_is_reply_writer(self, dispatcher, store):
        notification = dispatcher.dispatch(_reply_liked("r-question", locale="en"))

        assert notification.user_id == "u-fan"
        assert notification.message.startswith("Hyun recommended your answer!")
        assert "Count me in" in notification.message
        assert store.find_newer_than("u-writer", 0) == []

    def test_wordings_differ_per_category(self, dispatcher):
        messages = {
            dispatcher.dispatch(_reply_liked(reply_id, locale="en")).message
            for reply_id in ("r-question", "r-inspiration", "r-coworking")
        }
        assert len(messages) == 3

    def test_unknown_category_dropped_with_warning(self, dispatcher, store, channel):
        with capture_logs() as logs:
            result = dispatcher.dispatch(_reply_liked("r-notice"))

        assert result is None
        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert warnings[0]["event"] == "Push notification dropped"
        assert warnings[0]["reason"] == "UnsupportedCategory"
        assert store.rows == {}
        assert channel.attempts == []

    def test_unknown_reply_dropped(self, dispatcher, store):
        assert dispatcher.dispatch(_reply_liked("r-404")) is None
        assert store.rows == {}


class TestReplyUploaded:
    @pytest.mark.parametrize(
        "board_id, expected_type",
        [
            ("b-question", NotificationType.REPLY_UPLOAD_ANSWER),
            ("b-inspiration", NotificationType.REPLY_UPLOAD_INSPIRATION),
            ("b-coworking", NotificationType.REPLY_UPLOAD_COWORKING),
        ],
    )
    def test_type_follows_board_category(self, dispatcher, store, board_id, expected_type):
        dispatcher.dispatch(_reply_uploaded(board_id))

        rows = store.find_newer_than("u-writer", 0)
        assert len(rows) == 1
        assert rows[0].notification_type == expected_type.value

    def test_coworking_reply_interpolates_replier_name(self, dispatcher, channel):
        notification = dispatcher.dispatch(_reply_uploaded("b-coworking", locale="en"))

        assert notification.user_id == "u-writer"
        assert notification.notification_type == NotificationType.REPLY_UPLOAD_COWORKING.value
        assert notification.message.startswith("Jisoo responded to your coworking proposal!")
        assert channel.delivered[0]["payload"]["id"] == notification.id

    def test_unrecognized_category_persists_nothing(self, dispatcher, store, channel):
        assert dispatcher.dispatch(_reply_uploaded("b-notice")) is None
        assert store.rows == {}
        assert channel.attempts == []

    def test_missing_reply_text_still_notifies(self, dispatcher):
        notification = dispatcher.dispatch(_reply_uploaded("b-question", reply_id="r-not-indexed-yet", locale="en"))
        assert notification.message == "Jisoo answered your question!"

    def test_unknown_board_dropped(self, dispatcher, store):
        assert dispatcher.dispatch(_reply_uploaded("b-404", reply_id="r-1")) is None
        assert store.rows == {}

    def test_unknown_replier_dropped(self, dispatcher, store):
        assert dispatcher.dispatch(_reply_uploaded("b-question", writer_id="u-ghost")) is None
        assert store.rows == {}
