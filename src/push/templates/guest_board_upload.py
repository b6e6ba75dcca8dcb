"""Guest board upload template: sent to the member who opened the guest board."""

from push.notification.notification import NotificationType
from push.templates.base import MessageTemplate


class GuestBoardUploadTemplate(MessageTemplate):
    notification_type = NotificationType.GUEST_BOARD_UPLOAD.value
    messages = {
        "ko": "{actor} 멤버가 당신의 게스트 보드에 글을 남겼어요! {snippet}",
        "en": "{actor} left a note on your guest board! {snippet}",
    }
