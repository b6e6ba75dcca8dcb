"""Error taxonomy for push notification dispatch and queries.

Event-side errors (unsupported category or locale, missing recipient,
delivery failure) are handled inside the dispatcher and never reach the
event producer. PersistenceFailure propagates so the bus can apply its own
retry policy. ConfirmNotFound is surfaced to query callers.
"""


class PushDispatchError(Exception):
    """Base class for push notification errors."""


class UnsupportedCategory(PushDispatchError):
    """A reply or like event referenced a board category outside the known set."""

    def __init__(self, category):
        self.category = category
        super().__init__(f"Unsupported board category: {category!r}")


class UnsupportedLocale(PushDispatchError):
    """A template has no wording for the requested locale."""

    def __init__(self, locale, template_name):
        self.locale = locale
        self.template_name = template_name
        super().__init__(f"No {template_name} wording for locale: {locale!r}")


class RecipientNotFound(PushDispatchError):
    """A user, board or reply lookup returned nothing for a required id."""

    def __init__(self, kind: str, identifier):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")


class PersistenceFailure(PushDispatchError):
    """The notification store could not durably write a notification."""


class DeliveryFailure(PushDispatchError):
    """The transport could not hand a payload to the member's live session."""


class ConfirmNotFound(PushDispatchError):
    """No notification with this id belongs to the requesting member."""

    def __init__(self, notification_id):
        self.notification_id = notification_id
        super().__init__(f"Notification not found: {notification_id}")
