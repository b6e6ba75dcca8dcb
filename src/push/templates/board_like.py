"""Board like template: sent to the writer when a member recommends their board."""

from push.notification.notification import NotificationType
from push.templates.base import MessageTemplate


class BoardLikeTemplate(MessageTemplate):
    notification_type = NotificationType.BOARD_LIKE.value
    messages = {
        "ko": "{actor} 멤버가 당신의 보드를 추천했어요! {snippet}",
        "en": "{actor} recommended your board! {snippet}",
    }
