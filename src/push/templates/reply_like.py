"""Reply like templates: wording depends on the parent board's category."""

from push.notification.notification import NotificationType
from push.templates.base import MessageTemplate


class AnswerReplyLikeTemplate(MessageTemplate):
    notification_type = NotificationType.REPLY_LIKE_ANSWER.value
    messages = {
        "ko": "{actor} 멤버가 당신의 답변을 추천했어요! {snippet}",
        "en": "{actor} recommended your answer! {snippet}",
    }


class InspirationReplyLikeTemplate(MessageTemplate):
    notification_type = NotificationType.REPLY_LIKE_INSPIRATION.value
    messages = {
        "ko": "{actor} 멤버가 당신의 답글을 추천했어요! {snippet}",
        "en": "{actor} recommended your comment! {snippet}",
    }


class CoworkingReplyLikeTemplate(MessageTemplate):
    notification_type = NotificationType.REPLY_LIKE_COWORKING.value
    messages = {
        "ko": "{actor} 멤버가 당신의 참여를 추천했어요! {snippet}",
        "en": "{actor} recommended your participation! {snippet}",
    }
