"""Shared BDD fixtures and step definitions for push dispatch."""

from datetime import UTC, datetime

import pytest
from pytest_bdd import given, parsers, then
from shared.events.boards import BoardBanned


@pytest.fixture()
def outcome():
    """Container for the latest notification and captured errors."""
    return {"notification": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('member "{user_id}" is offline'))
def member_offline(channel, users, user_id):
    channel.disconnect(users.find_user(user_id).email)


@given(parsers.cfparse('member "{user_id}" is online'))
def member_online(channel, users, user_id):
    channel.connect(users.find_user(user_id).email)


@given(parsers.cfparse('board "{board_id}" written by "{writer_id}" is banned'))
def given_board_banned(dispatcher, outcome, board_id, writer_id):
    outcome["notification"] = dispatcher.dispatch(
        BoardBanned(board_id=board_id, writer_id=writer_id, banned_at=datetime.now(UTC))
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
def _latest(dispatcher, user_id):
    rows = dispatcher.get_newer_notifications(0, user_id)
    return rows[-1] if rows else None


@then(parsers.cfparse('member "{user_id}" has {count:d} notification of type "{notification_type}"'))
def has_notification_of_type(dispatcher, outcome, user_id, count, notification_type):
    rows = dispatcher.get_newer_notifications(0, user_id)
    assert len(rows) == count
    assert all(n.notification_type == notification_type for n in rows)
    outcome["notification"] = rows[-1]


@then(parsers.cfparse('member "{user_id}" has {count:d} notifications'))
def has_notifications(dispatcher, user_id, count):
    assert len(dispatcher.get_newer_notifications(0, user_id)) == count


@then("the notification is unconfirmed")
def notification_unconfirmed(dispatcher, outcome):
    latest = _latest(dispatcher, outcome["notification"].user_id)
    assert latest.confirmed is False


@then("the notification is confirmed")
def notification_confirmed(dispatcher, outcome):
    latest = _latest(dispatcher, outcome["notification"].user_id)
    assert latest.confirmed is True


@then(parsers.cfparse('the notification message mentions "{text}"'))
def message_mentions(outcome, text):
    assert text in outcome["notification"].message


@then(parsers.cfparse('a delivery was attempted to "{address}"'))
def delivery_attempted(channel, address):
    assert [a["address"] for a in channel.attempts] == [address]


@then(parsers.cfparse('the notification was delivered to "{address}"'))
def delivered_to(channel, outcome, address):
    assert channel.delivered[-1]["address"] == address
    assert channel.delivered[-1]["payload"]["id"] == outcome["notification"].id


@then("no delivery was attempted")
def no_delivery(channel):
    assert channel.attempts == []


@then("the confirmation is not found")
def confirmation_not_found(outcome):
    assert outcome["exc"] is not None
    assert type(outcome["exc"]).__name__ == "ConfirmNotFound"
