import pytest
from protean.integrations.pytest import DomainFixture
from push.channel.fake_delivery import FakeDeliveryChannel
from push.directory.fake_adapter import InMemoryBoardLookup, InMemoryUserDirectory
from push.directory.port import BoardRecord, ReplyRecord, UserRecord
from push.notification.dispatcher import NotificationDispatcher
from push.settings import PushSettings
from push.store.memory import InMemoryNotificationStore
from push.wiring import reset_dispatcher, set_dispatcher


@pytest.fixture(scope="session")
def push_bed():
    from push.domain import push

    bed = DomainFixture(push)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(push_bed):
    with push_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------
@pytest.fixture()
def users():
    return InMemoryUserDirectory(
        [
            UserRecord(user_id="u-writer", email="writer@boards.test", name="Minji"),
            UserRecord(user_id="u-fan", email="fan@boards.test", name="Jisoo"),
            UserRecord(user_id="u-guest", email="guest@boards.test", name="Hyun"),
        ]
    )


@pytest.fixture()
def boards():
    lookup = InMemoryBoardLookup()
    for board_id, category in (
        ("b-question", "QUESTION"),
        ("b-inspiration", "INSPIRATION"),
        ("b-coworking", "COWORKING"),
        ("b-notice", "NOTICE"),
    ):
        lookup.add_board(
            BoardRecord(
                board_id=board_id,
                writer_id="u-writer",
                category=category,
                title=f"{category.title()} board title",
                content="Looking for someone to build a side project with this winter",
            )
        )
        lookup.add_reply(
            ReplyRecord(
                reply_id=f"r-{board_id[2:]}",
                board_id=board_id,
                writer_id="u-fan",
                content="Count me in, I have weekends free",
            )
        )
    return lookup


@pytest.fixture()
def store():
    return InMemoryNotificationStore()


@pytest.fixture()
def channel():
    fake = FakeDeliveryChannel()
    fake.connect("writer@boards.test")
    return fake


@pytest.fixture()
def settings():
    return PushSettings(delivery_timeout=0.2, snippet_length=30)


@pytest.fixture()
def dispatcher(store, channel, users, boards, settings):
    d = NotificationDispatcher(store=store, channel=channel, users=users, boards=boards, settings=settings)
    yield d
    d.close()


@pytest.fixture()
def installed_dispatcher(dispatcher):
    """The dispatcher, installed as the one Protean handlers and routes use."""
    set_dispatcher(dispatcher)
    yield dispatcher
    reset_dispatcher()
