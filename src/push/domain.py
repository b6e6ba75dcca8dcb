"""Push bounded context — Board activity notifications delivered to live sessions.

Consumes events from the Boards domain (moderation, likes, replies and guest
board responses), records one PushNotification per event for the affected
member, and forwards the record to the member's live session when one is
connected. Members page through their notifications by id cursor and
confirm them once read.
"""

from protean.domain import Domain
from push.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

push = Domain(name="push")
