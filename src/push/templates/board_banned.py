"""Board banned template: fixed compliance notice, no substitutions."""

from push.notification.notification import NotificationType
from push.templates.base import MessageTemplate


class BoardBannedTemplate(MessageTemplate):
    notification_type = NotificationType.BOARD_BANNED.value
    messages = {
        "ko": (
            "당신의 게시글이 신고 및 규정 위반으로 삭제 처리되었습니다. "
            "이의 혹은 오류가 있을 경우 멤버십 센터에 문의주세요."
        ),
        "en": (
            "Your board was removed after reports or a policy violation. "
            "If you believe this is a mistake, please contact the membership center."
        ),
    }
