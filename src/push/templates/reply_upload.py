"""Reply upload templates: wording depends on the parent board's category."""

from push.notification.notification import NotificationType
from push.templates.base import MessageTemplate


class AnswerReplyUploadTemplate(MessageTemplate):
    notification_type = NotificationType.REPLY_UPLOAD_ANSWER.value
    messages = {
        "ko": "{actor} 멤버가 당신의 질문에 답변했어요! {snippet}",
        "en": "{actor} answered your question! {snippet}",
    }


class InspirationReplyUploadTemplate(MessageTemplate):
    notification_type = NotificationType.REPLY_UPLOAD_INSPIRATION.value
    messages = {
        "ko": "{actor} 멤버가 당신의 영감에 답글을 달았어요! {snippet}",
        "en": "{actor} commented on your inspiration! {snippet}",
    }


class CoworkingReplyUploadTemplate(MessageTemplate):
    notification_type = NotificationType.REPLY_UPLOAD_COWORKING.value
    messages = {
        "ko": "{actor} 멤버가 당신의 협업 제안에 응했어요! {snippet}",
        "en": "{actor} responded to your coworking proposal! {snippet}",
    }
