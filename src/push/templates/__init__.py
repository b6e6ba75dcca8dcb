"""Template registry — maps (event kind, board category) to message templates.

Board-level events have a single wording. Reply events branch on the parent
board's category because an answer to a question, a comment on an
inspiration and a response to a coworking proposal read differently.
"""

from push.notification.errors import UnsupportedCategory
from push.notification.notification import BoardCategory, EventKind
from push.templates.board_banned import BoardBannedTemplate
from push.templates.board_like import BoardLikeTemplate
from push.templates.guest_board_upload import GuestBoardUploadTemplate
from push.templates.reply_like import (
    AnswerReplyLikeTemplate,
    CoworkingReplyLikeTemplate,
    InspirationReplyLikeTemplate,
)
from push.templates.reply_upload import (
    AnswerReplyUploadTemplate,
    CoworkingReplyUploadTemplate,
    InspirationReplyUploadTemplate,
)

TEMPLATE_REGISTRY: dict[tuple[EventKind, BoardCategory | None], type] = {
    (EventKind.BOARD_BANNED, None): BoardBannedTemplate,
    (EventKind.BOARD_LIKED, None): BoardLikeTemplate,
    (EventKind.GUEST_BOARD_UPLOADED, None): GuestBoardUploadTemplate,
    (EventKind.REPLY_LIKED, BoardCategory.QUESTION): AnswerReplyLikeTemplate,
    (EventKind.REPLY_LIKED, BoardCategory.INSPIRATION): InspirationReplyLikeTemplate,
    (EventKind.REPLY_LIKED, BoardCategory.COWORKING): CoworkingReplyLikeTemplate,
    (EventKind.REPLY_UPLOADED, BoardCategory.QUESTION): AnswerReplyUploadTemplate,
    (EventKind.REPLY_UPLOADED, BoardCategory.INSPIRATION): InspirationReplyUploadTemplate,
    (EventKind.REPLY_UPLOADED, BoardCategory.COWORKING): CoworkingReplyUploadTemplate,
}

CATEGORY_KEYED_KINDS = frozenset({EventKind.REPLY_LIKED, EventKind.REPLY_UPLOADED})


def parse_category(raw) -> BoardCategory:
    """Convert a raw category value into a BoardCategory.

    Raises:
        UnsupportedCategory: for anything outside QUESTION, INSPIRATION, COWORKING.
    """
    if isinstance(raw, BoardCategory):
        return raw
    try:
        return BoardCategory(raw)
    except ValueError:
        raise UnsupportedCategory(raw) from None


def resolve(event_kind: EventKind, category=None):
    """Look up the template class for an event kind and board category.

    ``category`` is required (and validated) for reply events and ignored
    for every other kind.
    """
    if event_kind in CATEGORY_KEYED_KINDS:
        key = (event_kind, parse_category(category))
    else:
        key = (event_kind, None)

    template_cls = TEMPLATE_REGISTRY.get(key)
    if template_cls is None:
        raise ValueError(f"No template registered for event kind: {event_kind}")
    return template_cls
